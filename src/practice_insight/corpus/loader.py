"""Corpus loading: read reference documents from a directory.

Reads are independent, so they run concurrently on a thread pool. Every
read completes before this function returns; extraction never starts on a
partial corpus. A file that cannot be read is logged and skipped.

Layout:
    corpus/
        general-guide.md              -> category None (keyword-derived)
        error-handling/node.md        -> category "error-handling"
        code-style/react.cursorrules  -> category "code-style"
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Union

from ..exceptions import DocumentReadError, InvalidPathError
from ..logging_config import get_logger
from .models import CorpusDocument

logger = get_logger(__name__)

CORPUS_SUFFIXES = frozenset({".md", ".mdc", ".markdown", ".txt", ".cursorrules"})

_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)


def read_document(path: Path, root: Path) -> CorpusDocument:
    """Read one corpus file.

    Raises:
        DocumentReadError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, str(e)) from e

    relative = path.relative_to(root)
    category = relative.parts[0] if len(relative.parts) > 1 else None
    return CorpusDocument(text=text, category=category, source=relative.as_posix())


def _is_corpus_file(path: Path) -> bool:
    if not path.is_file():
        return False
    # A bare ".cursorrules" file is hidden by name but is still a rules document
    if path.name.endswith(".cursorrules"):
        return True
    if path.name.startswith("."):
        return False
    return path.suffix.lower() in CORPUS_SUFFIXES


def discover_documents(root: Path) -> list[Path]:
    """Corpus files under ``root``, sorted for deterministic ordering."""
    return sorted(p for p in root.rglob("*") if _is_corpus_file(p))


def load_corpus(
    directory: Union[str, Path], max_workers: Optional[int] = None
) -> list[CorpusDocument]:
    """Load all readable corpus documents under ``directory``.

    Args:
        directory: Corpus root
        max_workers: Thread pool size (defaults to CPU count, max 8)

    Returns:
        Documents ordered by relative path

    Raises:
        InvalidPathError: If ``directory`` is not an existing directory
    """
    root = Path(directory)
    if not root.is_dir():
        raise InvalidPathError(root, "corpus directory does not exist")

    paths = discover_documents(root)
    results: dict[Path, CorpusDocument] = {}

    with ThreadPoolExecutor(max_workers=max_workers or _DEFAULT_WORKERS) as executor:
        futures = {executor.submit(read_document, path, root): path for path in paths}
        for future in as_completed(futures):
            try:
                results[futures[future]] = future.result()
            except DocumentReadError as e:
                logger.warning(f"Skipping corpus document: {e}")

    logger.info(f"Loaded {len(results)}/{len(paths)} corpus documents from {root}")
    return [results[path] for path in paths if path in results]
