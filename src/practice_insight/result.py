"""AnalysisResult — everything one run hands to the formatters."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .requirements.models import Requirement
from .suggestions.models import ReconciliationReport


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one analysis run.

    ``report`` is None for requirement-only runs.
    """

    root: Optional[Path] = None
    report: Optional[ReconciliationReport] = None
    requirements: tuple[Requirement, ...] = ()
    practice_count: int = 0
    file_count: int = 0

    def to_dict(self) -> dict:
        data: dict = {
            "root": str(self.root) if self.root else None,
            "file_count": self.file_count,
            "practice_count": self.practice_count,
        }
        if self.report is not None:
            data.update(self.report.to_dict())
        data["requirements"] = [r.to_dict() for r in self.requirements]
        return data
