"""
Logging configuration for Practice Insight.

Every module logs under the ``practice_insight`` logger. Skipped corpus
documents and manifests are reported at WARNING, so the default verbosity
shows them; per-stage counts and detector decisions are DEBUG.
"""

import logging
from typing import Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "practice_insight"

VERBOSITY_LEVELS: Mapping[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure logging with a rich handler on stderr.

    Reports go to stdout, so logs never mix into JSON or Markdown output.

    Args:
        verbosity: One of quiet, normal, verbose (see ReconcileConfig)
        log_file: Optional file path that also receives every record at the
                  chosen level

    Returns:
        Configured logger instance for practice_insight
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # corpus text may contain [brackets] that are not rich markup
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the practice_insight namespace; the root one for None."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
