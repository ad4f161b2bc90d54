"""CLI entry point — registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="practice-insight",
    help="Practice Insight - reconcile a codebase with reference guidance",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(
            f"[bold cyan]Practice Insight[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Practice Insight - reconcile a codebase with reference guidance."""


# Import subcommands to register them
from .reconcile import reconcile as _reconcile  # noqa: F401, E402
from .requirements import requirements as _requirements  # noqa: F401, E402
