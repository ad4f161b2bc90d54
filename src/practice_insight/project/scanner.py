"""File discovery for the target project.

Walks the tree once, skipping vendor/build directories, hidden files and
anything matching an exclude pattern. Paths are returned relative to the
root in POSIX form and sorted, so every downstream sample is deterministic.

Example:
    >>> discover_files(Path("/path/to/app"))
    ['package.json', 'src/App.tsx', 'src/features/auth/index.ts']
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..exceptions import InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)

SKIP_DIRS = frozenset(
    {
        "node_modules",
        "vendor",
        "dist",
        "build",
        "out",
        ".git",
        ".hg",
        ".svn",
        "venv",
        ".venv",
        "env",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".tox",
        ".next",
        ".nuxt",
        ".svelte-kit",
        "coverage",
        ".turbo",
        ".cache",
    }
)


def should_skip_file(filepath: Path, exclude_patterns: Sequence[str]) -> bool:
    """Check a relative path against glob-style exclude patterns."""
    return any(filepath.match(pattern) for pattern in exclude_patterns)


def discover_files(
    root: Path | str,
    exclude_patterns: Sequence[str] = (),
    allow_hidden_files: bool = False,
    follow_symlinks: bool = False,
) -> list[str]:
    """List project files under ``root``.

    Args:
        root: Project root directory
        exclude_patterns: Glob patterns matched against relative paths
        allow_hidden_files: Include hidden files (starting with .)
        follow_symlinks: Follow symbolic links

    Returns:
        Sorted relative POSIX paths

    Raises:
        InvalidPathError: If root does not exist or is not a directory
    """
    root = Path(root)
    if not root.exists():
        raise InvalidPathError(root, "Path does not exist")
    if not root.is_dir():
        raise InvalidPathError(root, "Not a directory")

    files: list[str] = []
    for item in root.rglob("*"):
        rel = item.relative_to(root)
        if any(part in SKIP_DIRS for part in rel.parts):
            continue

        if item.is_symlink() and not follow_symlinks:
            continue

        if not allow_hidden_files and any(part.startswith(".") for part in rel.parts):
            continue

        if item.is_file() and not should_skip_file(rel, exclude_patterns):
            files.append(rel.as_posix())

    files.sort()
    logger.debug(f"Discovered {len(files)} files under {root}")
    return files


def list_directories(files: Sequence[str]) -> list[str]:
    """Every directory that contains at least one discovered file, sorted."""
    dirs: set[str] = set()
    for rel in files:
        parent = Path(rel).parent
        while parent != Path("."):
            dirs.add(parent.as_posix())
            parent = parent.parent
    return sorted(dirs)
