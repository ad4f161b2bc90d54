"""Base exception for Practice Insight."""

from typing import Dict, Optional


class PracticeInsightError(Exception):
    """Base exception for all Practice Insight errors.

    ``details`` names what failed (a path, a config key, a corpus source) so
    callers can report it without parsing the message.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict:
        """JSON-ready error body, as printed by ``--format json``."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": dict(self.details),
        }
