"""PracticeSampler — derive code-style, error-handling and component signals.

Counts surface-level cues with regular expressions over a capped sample of
source files. A style is reported only when it outnumbers its rival at
least 2:1; otherwise the field is ``mixed``.

Usage:
    sampler = PracticeSampler(sample_limit=50)
    practice = sampler.sample(root, files)
    practice.code_style.variable_declaration   # "const-let"
"""

from __future__ import annotations

import re
from collections import Counter
from pathlib import Path
from typing import Collection, Mapping, Optional, Sequence

from ..logging_config import get_logger
from ..signals.models import (
    CodeStylePattern,
    ComponentPattern,
    ErrorHandlingPattern,
    Indentation,
    ProjectPractice,
)
from ..signals.sampling import read_files

logger = get_logger(__name__)

SCRIPT_EXTENSIONS = frozenset({".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".vue", ".svelte"})
ERROR_EXTENSIONS = SCRIPT_EXTENSIONS | {".py"}
COMPONENT_EXTENSIONS = frozenset({".tsx", ".jsx", ".vue", ".svelte"})

DOMINANCE_RATIO = 2

_CONST_LET = re.compile(r"\b(?:const|let)\s+")
_VAR = re.compile(r"\bvar\s+")
_ARROW = re.compile(r"=>\s*[{(]")
_FUNCTION = re.compile(r"\bfunction\s+\w+")
_SINGLE_QUOTE = re.compile(r"'[^'\n]*'")
_DOUBLE_QUOTE = re.compile(r'"[^"\n]*"')
_INDENT = re.compile(r"^(\s+)")

_TRY = re.compile(r"\btry\s*(?:\{|:)")
_PROMISE_CATCH = re.compile(r"\.catch\(")
_CUSTOM_ERROR = re.compile(
    r"class\s+(\w+(?:Error|Exception))\s*(?:extends\s+\w*Error\b|\(\s*\w*(?:Error|Exception)\s*\))"
)
_LOGGER_LIBRARIES = ("winston", "pino", "loguru", "structlog")

_FUNCTIONAL_COMPONENT = re.compile(
    r"(?:const\s+[A-Z]\w*\s*[:=][^\n]*=>)|(?:function\s+[A-Z]\w*\s*\()"
)
_CLASS_COMPONENT = re.compile(r"class\s+\w+\s+extends\s+(?:React\.)?(?:Pure)?Component\b")
_NAMED_EXPORT = re.compile(r"export\s+(?:const|function|class)\s+")
_DEFAULT_EXPORT = re.compile(r"export\s+default\b")
_STATE_CUES = (
    ("useState", "useState"),
    ("useReducer", "useReducer"),
    ("useContext", "useContext"),
    ("useDispatch", "redux"),
    ("useSelector", "redux"),
    ("zustand", "zustand"),
    ("usePinia", "pinia"),
    ("defineStore", "pinia"),
    ("useAtom", "jotai"),
    ("useRecoilState", "recoil"),
)


def dominant(first: str, first_count: int, second: str, second_count: int) -> str:
    """``first`` or ``second`` when one outnumbers the other 2:1, else ``mixed``."""
    if first_count > second_count * DOMINANCE_RATIO:
        return first
    if second_count > first_count * DOMINANCE_RATIO:
        return second
    return "mixed"


def _with_suffix(contents: Mapping[str, str], extensions: Collection[str]) -> dict[str, str]:
    return {k: v for k, v in contents.items() if Path(k).suffix.lower() in extensions}


def analyze_code_style(contents: Mapping[str, str]) -> Optional[CodeStylePattern]:
    """None when no script files were sampled."""
    files = _with_suffix(contents, SCRIPT_EXTENSIONS)
    if not files:
        return None

    counts: Counter[str] = Counter()
    for text in files.values():
        counts["const_let"] += len(_CONST_LET.findall(text))
        counts["var"] += len(_VAR.findall(text))
        counts["arrow"] += len(_ARROW.findall(text))
        counts["function"] += len(_FUNCTION.findall(text))
        counts["single"] += len(_SINGLE_QUOTE.findall(text))
        counts["double"] += len(_DOUBLE_QUOTE.findall(text))

        lines = [line for line in text.splitlines() if line.strip()]
        for line in lines:
            stripped = line.strip()
            if stripped.endswith(";"):
                counts["semi"] += 1
            elif not stripped.endswith(("{", "}")):
                counts["no_semi"] += 1
        for line in lines[:10]:
            match = _INDENT.match(line)
            if match:
                counts["tabs" if "\t" in match.group(1) else "spaces"] += 1

    return CodeStylePattern(
        variable_declaration=dominant("const-let", counts["const_let"], "var", counts["var"]),
        function_style=dominant("arrow", counts["arrow"], "function", counts["function"]),
        string_quote=dominant("single", counts["single"], "double", counts["double"]),
        semicolon=dominant("always", counts["semi"], "never", counts["no_semi"]),
        indentation=Indentation(type="tabs" if counts["tabs"] > counts["spaces"] else "spaces"),
    )


def analyze_error_handling(contents: Mapping[str, str]) -> Optional[ErrorHandlingPattern]:
    files = _with_suffix(contents, ERROR_EXTENSIONS)
    if not files:
        return None

    try_count = 0
    promise_count = 0
    custom: set[str] = set()
    logging_method = "none"
    logger_library: Optional[str] = None

    for text in files.values():
        try_count += len(_TRY.findall(text))
        promise_count += len(_PROMISE_CATCH.findall(text))
        custom.update(_CUSTOM_ERROR.findall(text))

        library = next((lib for lib in _LOGGER_LIBRARIES if lib in text), None)
        if library:
            logging_method, logger_library = "logger-library", library
        elif "logger." in text or "logging.getLogger" in text:
            logging_method, logger_library = "logger-library", logger_library or "custom"
        elif logging_method == "none" and ("console.log" in text or "console.error" in text):
            logging_method = "console"

    total = try_count + promise_count
    if total == 0:
        handling_type = "none"
    elif try_count > promise_count:
        handling_type = "try-catch"
    else:
        handling_type = "promise-catch"

    return ErrorHandlingPattern(
        type=handling_type,
        frequency=total,
        custom_error_types=tuple(sorted(custom)),
        logging_method=logging_method,
        logger_library=logger_library,
    )


def _is_component_file(path: str) -> bool:
    p = Path(path)
    if p.suffix.lower() not in COMPONENT_EXTENSIONS:
        return False
    return "components" in p.parts or p.stem[:1].isupper()


def analyze_components(contents: Mapping[str, str]) -> Optional[ComponentPattern]:
    files = {k: v for k, v in contents.items() if _is_component_file(k)}
    if not files:
        return None

    functional = 0
    class_based = 0
    named = 0
    default = 0
    state: list[str] = []

    for text in files.values():
        if _FUNCTIONAL_COMPONENT.search(text):
            functional += 1
        elif _CLASS_COMPONENT.search(text):
            class_based += 1
        if _NAMED_EXPORT.search(text):
            named += 1
        if _DEFAULT_EXPORT.search(text):
            default += 1
        for cue, name in _STATE_CUES:
            if cue in text and name not in state:
                state.append(name)

    if named > default:
        export_style = "named"
    elif default > named:
        export_style = "default"
    else:
        export_style = "mixed"

    return ComponentPattern(
        type=dominant("functional", functional, "class", class_based),
        export_style=export_style,
        state_management=tuple(state),
    )


class PracticeSampler:
    """Reads a capped sample of source files and derives ProjectPractice.

    Args:
        sample_limit: Max files read (first N code files by sorted path)
        code_extensions: Extensions eligible for sampling
        max_workers: Thread pool size for reads (None = auto)
    """

    def __init__(
        self,
        sample_limit: int = 50,
        code_extensions: Collection[str] = ERROR_EXTENSIONS,
        max_workers: Optional[int] = None,
    ):
        self.sample_limit = sample_limit
        self.code_extensions = frozenset(e.lower() for e in code_extensions)
        self.max_workers = max_workers

    def select(self, files: Sequence[str]) -> list[str]:
        eligible = sorted(f for f in files if Path(f).suffix.lower() in self.code_extensions)
        return eligible[: self.sample_limit]

    def sample(self, root: Path, files: Sequence[str]) -> ProjectPractice:
        contents = read_files(Path(root), self.select(files), max_workers=self.max_workers)
        return self.analyze(contents)

    def analyze(self, contents: Mapping[str, str]) -> ProjectPractice:
        """Derive signals from already-read file contents (original case)."""
        practice = ProjectPractice(
            code_style=analyze_code_style(contents),
            error_handling=analyze_error_handling(contents),
            component_pattern=analyze_components(contents),
        )
        logger.debug(
            f"Practice sample of {len(contents)} files: "
            f"style={'yes' if practice.code_style else 'no'}, "
            f"errors={practice.error_handling.type if practice.error_handling else 'none'}, "
            f"components={practice.component_pattern.type if practice.component_pattern else 'none'}"
        )
        return practice
