"""Structural signals — code features, routers and directory purposes.

All detectors work on the sorted relative path list from the scanner; code
feature detection may also consult already-read file contents. Results are
deterministic for a given input.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Mapping, Optional, Sequence

from ..logging_config import get_logger
from ..signals.models import CodeFeature, DirectoryPurpose, RouterSignal
from .scanner import list_directories

logger = get_logger(__name__)

SCRIPT_SUFFIXES = frozenset({".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"})
UI_SUFFIXES = frozenset({".tsx", ".jsx", ".vue", ".svelte"})

_TEST_FILE = re.compile(r"(?:\.(?:test|spec)\.[jt]sx?$)|(?:(?:^|/)test_\w+\.py$)|(?:_test\.(?:py|go)$)")
_HOOK_FILE = re.compile(r"^use[A-Z]\w*$")
_STATE_CONTENT = re.compile(
    r"\b(?:createStore|configureStore|createSlice|defineStore|makeAutoObservable)\(", re.IGNORECASE
)
_ERROR_CONTENT = re.compile(r"class\s+\w+(?:Error|Exception)\b", re.IGNORECASE)

FEATURE_DESCRIPTIONS: Mapping[str, str] = {
    "testing": "test files",
    "custom-components": "project UI components",
    "custom-hooks": "custom hooks",
    "custom-utils": "shared utility modules",
    "api-client": "API client modules",
    "state-management": "state stores",
    "error-handling": "custom error types",
}

DIRECTORY_PURPOSES: tuple[tuple[str, frozenset[str]], ...] = (
    ("feature", frozenset({"features", "feature"})),
    ("module", frozenset({"modules", "module"})),
    ("component", frozenset({"components", "component", "ui", "widgets"})),
    ("utility", frozenset({"utils", "util", "helpers", "lib", "common", "shared"})),
    ("service", frozenset({"services", "service", "api", "clients"})),
    ("test", frozenset({"tests", "test", "__tests__", "spec", "e2e"})),
    ("config", frozenset({"config", "configs", "settings"})),
)


def _is_test_file(path: PurePosixPath) -> bool:
    if any(part in {"__tests__", "tests", "test", "e2e"} for part in path.parts[:-1]):
        return True
    return bool(_TEST_FILE.search(path.as_posix()))


def _feature_matches(path: PurePosixPath, content: Optional[str]) -> list[str]:
    parts = set(path.parts[:-1])
    suffix = path.suffix.lower()
    stem = path.stem
    found: list[str] = []

    if _is_test_file(path):
        found.append("testing")
        return found

    if suffix in UI_SUFFIXES and "components" in parts:
        found.append("custom-components")
    if suffix in SCRIPT_SUFFIXES and (_HOOK_FILE.match(stem) or "hooks" in parts):
        found.append("custom-hooks")
    if parts & {"utils", "helpers", "lib"}:
        found.append("custom-utils")
    lowered = stem.lower()
    if ("api" in parts or "services" in parts) and ("api" in lowered or "client" in lowered):
        found.append("api-client")
    if parts & {"store", "stores", "state", "redux"} or (content and _STATE_CONTENT.search(content)):
        found.append("state-management")
    if "errors" in parts or (content and _ERROR_CONTENT.search(content)):
        found.append("error-handling")
    return found


def detect_code_features(
    files: Sequence[str], contents: Optional[Mapping[str, str]] = None
) -> dict[str, CodeFeature]:
    """Count files exhibiting each code feature; absent features are omitted.

    Args:
        files: Relative paths from the scanner
        contents: Optional already-read contents (any subset of files)
    """
    contents = contents or {}
    counts: dict[str, int] = {}
    for rel in files:
        for name in _feature_matches(PurePosixPath(rel), contents.get(rel)):
            counts[name] = counts.get(name, 0) + 1

    features = {
        name: CodeFeature(type=name, frequency=counts[name], description=FEATURE_DESCRIPTIONS[name])
        for name in FEATURE_DESCRIPTIONS
        if counts.get(name)
    }
    logger.debug(
        "Code features: " + (", ".join(f"{k}={v.frequency}" for k, v in features.items()) or "none")
    )
    return features


def _frontend_framework(path: PurePosixPath) -> Optional[tuple[str, Optional[str]]]:
    """(matched, framework) for a frontend routing file, else None."""
    parts = path.parts[:-1]
    suffix = path.suffix.lower()
    name = path.name
    if "app" in parts and path.stem == "page" and suffix in SCRIPT_SUFFIXES:
        return ("app-router", "Next.js")
    if "routes" in parts and name.startswith("+page.") and suffix == ".svelte":
        return ("routes", "SvelteKit")
    if "pages" in parts and suffix == ".vue":
        return ("pages", "Nuxt")
    if "pages" in parts and suffix in SCRIPT_SUFFIXES and not name.startswith("_") and "api" not in parts:
        return ("pages", "Next.js")
    if "routes" in parts and suffix in {".tsx", ".jsx"}:
        return ("routes", "Remix")
    if "router" in path.stem.lower() and suffix in SCRIPT_SUFFIXES and "server" not in parts:
        return ("router-file", None)
    return None


def _backend_framework(path: PurePosixPath) -> Optional[tuple[str, Optional[str]]]:
    parts = path.parts[:-1]
    suffix = path.suffix.lower()
    if path.name == "urls.py":
        return ("urls", "Django")
    if path.name.endswith(".controller.ts"):
        return ("controller", "NestJS")
    if "controllers" in parts and suffix in SCRIPT_SUFFIXES | {".py"}:
        return ("controllers", None)
    if "routes" in parts and suffix in {".js", ".ts", ".mjs", ".cjs", ".py"}:
        return ("routes", "Express" if suffix != ".py" else None)
    if "api" in parts and "pages" in parts and suffix in SCRIPT_SUFFIXES:
        return ("api-routes", "Next.js")
    return None


def detect_routers(files: Sequence[str]) -> list[RouterSignal]:
    """Frontend and backend routing evidence from the file layout.

    The framework is the first one identified in path order; files lists
    every matching path.
    """
    signals: list[RouterSignal] = []
    for kind, detector in (("frontend", _frontend_framework), ("backend", _backend_framework)):
        matched: list[str] = []
        framework: Optional[str] = None
        for rel in sorted(files):
            hit = detector(PurePosixPath(rel))
            if hit is None:
                continue
            matched.append(rel)
            if framework is None:
                framework = hit[1]
        if matched:
            signals.append(RouterSignal(kind=kind, framework=framework, files=tuple(matched)))
            logger.debug(f"{kind} routing: {framework or 'unknown'} ({len(matched)} files)")
    return signals


def purpose_of(directory: str) -> str:
    """Purpose of one directory from its own name, or its parent's for children."""
    path = PurePosixPath(directory)
    name = path.name.lower()
    for purpose, names in DIRECTORY_PURPOSES:
        if name in names:
            return purpose
    parent = path.parent.name.lower()
    if parent in {"features", "feature"}:
        return "feature"
    if parent in {"modules", "module"}:
        return "module"
    return "other"


def classify_directories(files: Sequence[str]) -> list[DirectoryPurpose]:
    return [DirectoryPurpose(path=d, purpose=purpose_of(d)) for d in list_directories(files)]
