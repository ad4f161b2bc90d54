"""Project signal models — how the target codebase actually behaves.

Signals are produced by collaborators (see ``practice_insight.project``) and
consumed read-only by the comparator and requirement synthesizer. Every
field of ``ProjectPractice`` and ``ProjectSignals`` may be absent; absence is
zero evidence, never an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Optional

if TYPE_CHECKING:
    from .sampling import FileSample

VariableDeclaration = Literal["const-let", "var", "mixed"]
FunctionStyle = Literal["arrow", "function", "mixed"]
StringQuote = Literal["single", "double", "backtick", "mixed"]
Semicolon = Literal["always", "never", "mixed"]
ErrorHandlingType = Literal["try-catch", "promise-catch", "callback", "none"]
LoggingMethod = Literal["console", "logger-library", "none"]
ComponentType = Literal["functional", "class", "mixed"]
ExportStyle = Literal["named", "default", "mixed"]
RouterKind = Literal["frontend", "backend"]


@dataclass(frozen=True)
class Indentation:
    type: Literal["spaces", "tabs"] = "spaces"
    size: int = 2


@dataclass(frozen=True)
class CodeStylePattern:
    """Dominant code style. A value is ``mixed`` when no style wins 2:1."""

    variable_declaration: VariableDeclaration = "mixed"
    function_style: FunctionStyle = "mixed"
    string_quote: StringQuote = "mixed"
    semicolon: Semicolon = "mixed"
    indentation: Indentation = field(default_factory=Indentation)


@dataclass(frozen=True)
class ErrorHandlingPattern:
    type: ErrorHandlingType = "none"
    frequency: int = 0
    custom_error_types: tuple[str, ...] = ()
    logging_method: LoggingMethod = "none"
    logger_library: Optional[str] = None


@dataclass(frozen=True)
class ComponentPattern:
    type: ComponentType = "mixed"
    export_style: ExportStyle = "mixed"
    state_management: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectPractice:
    """Output of the practice sampler; any part may be missing."""

    code_style: Optional[CodeStylePattern] = None
    error_handling: Optional[ErrorHandlingPattern] = None
    component_pattern: Optional[ComponentPattern] = None


@dataclass(frozen=True)
class DirectoryPurpose:
    """Inferred role of a directory (feature, module, component, utility, ...)."""

    path: str
    purpose: str


@dataclass(frozen=True)
class Dependency:
    name: str
    version: str = ""
    type: str = "production"


@dataclass(frozen=True)
class CodeFeature:
    type: str
    frequency: int = 0
    description: str = ""


@dataclass(frozen=True)
class RouterSignal:
    """Routing evidence observed in the file structure."""

    kind: RouterKind
    framework: Optional[str] = None
    files: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectSignals:
    """Everything the comparator may consult for one analysis run."""

    practice: ProjectPractice = field(default_factory=ProjectPractice)
    directory_purposes: tuple[DirectoryPurpose, ...] = ()
    file_sample: Optional["FileSample"] = None
