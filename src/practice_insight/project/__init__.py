"""Project collaborators: file discovery, manifests, practice and structure signals."""

from .features import classify_directories, detect_code_features, detect_routers, purpose_of
from .manifests import read_dependencies
from .practice import PracticeSampler
from .scanner import SKIP_DIRS, discover_files, list_directories
from .stack import detect_tech_stack

__all__ = [
    "SKIP_DIRS",
    "PracticeSampler",
    "classify_directories",
    "detect_code_features",
    "detect_routers",
    "detect_tech_stack",
    "discover_files",
    "list_directories",
    "purpose_of",
    "read_dependencies",
]
