"""FileSample — a capped, fully-read sample of project source files.

The cap is an explicit argument, never module state, so two runs with
different limits can share a process. Files are read concurrently; a file
that fails to read is absent from the sample (no retry).

Usage:
    sample = sample_files(root, files, limit=50, extensions={".ts", ".py"})
    sample.fraction_containing(["usestate", "useeffect"])
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Collection, Iterable, Mapping, Optional, Sequence

import numpy as np

from ..logging_config import get_logger

logger = get_logger(__name__)

_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)


@dataclass(frozen=True)
class FileSample:
    """Lower-cased contents of sampled files, keyed by relative path."""

    contents: Mapping[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.contents)

    def head(self, limit: int) -> "FileSample":
        """The first ``limit`` files by path."""
        if len(self.contents) <= limit:
            return self
        keys = sorted(self.contents)[:limit]
        return FileSample(contents={k: self.contents[k] for k in keys})

    def fraction_containing(self, keywords: Iterable[str]) -> float:
        """Fraction of sampled files containing at least one keyword.

        Each file counts once regardless of how many keywords it contains.
        Returns 0.0 for an empty sample or an empty keyword list.
        """
        needles = [k.lower() for k in keywords if k]
        if not needles or not self.contents:
            return 0.0
        hits = np.fromiter(
            (any(n in text for n in needles) for text in self.contents.values()),
            dtype=bool,
            count=len(self.contents),
        )
        return float(hits.mean())


def select_code_files(
    files: Sequence[str], extensions: Collection[str], limit: int
) -> list[str]:
    """First ``limit`` files (in sorted order) with a code extension."""
    wanted = {e.lower() for e in extensions}
    code_files = sorted(f for f in files if Path(f).suffix.lower() in wanted)
    return code_files[:limit]


def read_files(
    root: Path, paths: Sequence[str], max_workers: Optional[int] = None
) -> dict[str, str]:
    """Read files concurrently; unreadable files are skipped.

    The result follows the order of ``paths``, whatever order reads finish in.
    """

    def _read(rel: str) -> str:
        return (root / rel).read_text(encoding="utf-8", errors="replace")

    contents: dict[str, str] = {}
    if not paths:
        return contents

    with ThreadPoolExecutor(max_workers=max_workers or _DEFAULT_WORKERS) as executor:
        futures = {executor.submit(_read, rel): rel for rel in paths}
        for future in as_completed(futures):
            rel = futures[future]
            try:
                contents[rel] = future.result()
            except OSError as e:
                logger.debug(f"Cannot read {rel}: {e}")
    return {rel: contents[rel] for rel in paths if rel in contents}


def sample_files(
    root: Path,
    files: Sequence[str],
    limit: int,
    extensions: Collection[str],
    max_workers: Optional[int] = None,
) -> FileSample:
    """Build a FileSample of at most ``limit`` code files under ``root``."""
    selected = select_code_files(files, extensions, limit)
    raw = read_files(root, selected, max_workers=max_workers)
    logger.debug(f"Sampled {len(raw)}/{len(selected)} files (limit {limit})")
    return FileSample(contents={rel: raw[rel].lower() for rel in selected if rel in raw})
