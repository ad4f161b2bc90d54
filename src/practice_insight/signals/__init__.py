"""Project signals consumed by the comparator and requirement synthesizer."""

from .models import (
    CodeFeature,
    CodeStylePattern,
    ComponentPattern,
    Dependency,
    DirectoryPurpose,
    ErrorHandlingPattern,
    Indentation,
    ProjectPractice,
    ProjectSignals,
    RouterSignal,
)
from .sampling import FileSample, read_files, sample_files, select_code_files

__all__ = [
    "CodeFeature",
    "CodeStylePattern",
    "ComponentPattern",
    "Dependency",
    "DirectoryPurpose",
    "ErrorHandlingPattern",
    "FileSample",
    "Indentation",
    "ProjectPractice",
    "ProjectSignals",
    "RouterSignal",
    "read_files",
    "sample_files",
    "select_code_files",
]
