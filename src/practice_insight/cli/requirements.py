"""Requirements CLI command -- decide which guidance documents a project needs."""

from pathlib import Path
from typing import Optional

import typer

from ..api import analyze
from ..exceptions import PracticeInsightError
from ..logging_config import get_logger
from . import app
from ._common import OutputFormat, build_overrides, make_formatter, report_error

logger = get_logger(__name__)


@app.command()
def requirements(
    path: Path = typer.Argument(
        Path("."),
        help="Project root to analyze",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.markdown,
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="TOML configuration file",
    ),
):
    """
    List the guidance documents a project needs.

    Baseline documents are always required. Optional documents are
    required when a dependency or the project's own files show the
    concern; file evidence gives high confidence, a dependency alone
    gives medium.

    [bold cyan]Examples:[/bold cyan]

      practice-insight requirements .

      practice-insight requirements app --format json
    """
    try:
        result = analyze(
            path,
            config_file=config,
            **build_overrides(verbose=verbose, quiet=quiet),
        )
        make_formatter(output_format).render(result)

    except PracticeInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        report_error(e, output_format)
        raise typer.Exit(1)
