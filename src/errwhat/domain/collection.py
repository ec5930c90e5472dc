from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from errwhat.domain.info import InfoEntry


class InfoCollection(tuple[InfoEntry, ...]):
    """Ordered, immutable sequence of :class:`InfoEntry`.

    Order matters until the collection is flattened: later entries for a key
    win, earlier positions are kept.
    """

    __slots__ = ()

    def __new__(cls, entries: Iterable[InfoEntry] = ()) -> InfoCollection:
        return super().__new__(cls, entries)

    def __add__(self, other: tuple[InfoEntry, ...]) -> InfoCollection:  # type: ignore[override]
        return InfoCollection(tuple.__add__(self, other))

    def __repr__(self) -> str:
        return f"InfoCollection({tuple.__repr__(self)})"

    def flatten(self) -> InfoCollection:
        """Drop duplicate keys.

        Each key keeps the value of its last entry, reported at the position
        of its first entry.
        """
        first_seen: dict[str, None] = {}
        last_index: dict[str, int] = {}
        for index, info in enumerate(self):
            first_seen.setdefault(info.key)
            last_index[info.key] = index
        return InfoCollection(self[last_index[key]] for key in first_seen)

    def to_json(self) -> dict[str, Any]:
        """Project to a key -> value mapping, last write wins."""
        return {info.key: info.value for info in self}
