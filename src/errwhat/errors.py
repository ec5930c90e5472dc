from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class ErrWhatError(Exception):
    """Base error for failures of the library itself.

    Attributes:
        message: Human-readable message describing the error.
        code: Optional machine-readable code for monitoring/alerts.
        context: Optional structured context for diagnostics.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingCauseError(ErrWhatError):
    """Raised when a structured error is built without a cause."""

    message: str = field(init=False, default="StructuredError requires a cause")
    code: str = field(init=False, default="ERRWHAT_MISSING_CAUSE")
