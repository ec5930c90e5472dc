"""Domain-level protocols for collaborators supplied by callers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from errwhat.domain.collection import InfoCollection


@runtime_checkable
class StructuredContext(Protocol):
    """Anything that can contribute additional info to a structured error.

    Contexts are compared by identity only; two contexts holding equal info
    are still distinct.
    """

    def get_additional_info(self) -> InfoCollection:  # pragma: no cover - protocol definition
        """Return this context's info in insertion order."""
        ...
