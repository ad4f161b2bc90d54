"""Output formatters for Practice Insight."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .markdown_formatter import MarkdownFormatter
from .rich_formatter import RichFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "markdown", "json", "rich"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "markdown": MarkdownFormatter,
        "json": JsonFormatter,
        "rich": RichFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "MarkdownFormatter",
    "RichFormatter",
    "get_formatter",
]
