"""Shared CLI helpers."""

import json
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from ..exceptions import InvalidPathError, PracticeInsightError
from ..formatters import BaseFormatter, RichFormatter, get_formatter

console = Console()


class OutputFormat(str, Enum):
    markdown = "markdown"
    json = "json"
    rich = "rich"


def make_formatter(output_format: OutputFormat) -> BaseFormatter:
    """Formatter for the chosen format; rich output goes to the CLI console."""
    if output_format == OutputFormat.rich:
        return RichFormatter(console=console)
    return get_formatter(output_format.value)


def report_error(error: PracticeInsightError, output_format: OutputFormat) -> None:
    """Print an error; JSON output gets a JSON error body on stdout."""
    if output_format == OutputFormat.json:
        print(json.dumps(error.to_dict(), indent=2))
    else:
        console.print(f"[red]Error:[/red] {error}", highlight=False)


def read_existing_documentation(paths: Optional[Sequence[Path]]) -> list[str]:
    """Read previously generated documentation files.

    Raises:
        InvalidPathError: If a file is missing or unreadable
    """
    texts = []
    for path in paths or ():
        if not path.is_file():
            raise InvalidPathError(path, "documentation file does not exist")
        try:
            texts.append(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise InvalidPathError(path, f"cannot read documentation file: {e}")
    return texts


def build_overrides(
    verbose: bool = False,
    quiet: bool = False,
    sample_limit: Optional[int] = None,
    tech: Optional[Sequence[str]] = None,
) -> dict:
    """Config overrides from CLI options; unset options are omitted."""
    overrides: dict = {}
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    if sample_limit is not None:
        overrides["sample_limit"] = sample_limit
    if tech:
        overrides["tech_stack"] = list(tech)
    return overrides
