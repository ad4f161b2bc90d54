"""Reconcile CLI command -- compare a project against a reference corpus."""

from pathlib import Path
from typing import List, Optional

import typer

from ..api import analyze
from ..exceptions import PracticeInsightError
from ..logging_config import get_logger
from . import app
from ._common import (
    OutputFormat,
    build_overrides,
    console,
    make_formatter,
    read_existing_documentation,
    report_error,
)

logger = get_logger(__name__)


@app.command()
def reconcile(
    path: Path = typer.Argument(
        Path("."),
        help="Project root to analyze",
    ),
    corpus: Path = typer.Option(
        ...,
        "--corpus",
        "-c",
        help="Directory of reference guidance documents (*.md, *.mdc, *.txt, .cursorrules)",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.markdown,
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
    tech: Optional[List[str]] = typer.Option(
        None,
        "--tech",
        "-t",
        help="Tech-stack names used to tag practices (replaces the detected stack)",
    ),
    existing: Optional[List[Path]] = typer.Option(
        None,
        "--existing",
        "-e",
        help="Previously generated documentation; practices named there count as documented",
    ),
    sample_limit: Optional[int] = typer.Option(
        None,
        "--sample-limit",
        help="Max files sampled for keyword matching",
        min=1,
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
    Reconcile a project with a reference corpus.

    Extracts practices from the corpus, scores each against evidence sampled
    from the project, and reports suggestions, missing practices and
    practices that need confirmation, followed by the required documents.

    [bold cyan]Examples:[/bold cyan]

      practice-insight reconcile . --corpus ./guides

      practice-insight reconcile app --corpus ./guides --format json

      practice-insight reconcile . -c ./guides --tech React --tech TypeScript
    """
    try:
        documentation = read_existing_documentation(existing)
        result = analyze(
            path,
            corpus_dir=corpus,
            config_file=config,
            existing_documentation=documentation,
            **build_overrides(verbose=verbose, quiet=quiet, sample_limit=sample_limit, tech=tech),
        )
        make_formatter(output_format).render(result)

    except PracticeInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        report_error(e, output_format)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)
