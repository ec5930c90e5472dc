from __future__ import annotations

import itertools
import sys
import traceback
from typing import TypeVar

from errwhat.domain.chain import ErrorTarget, as_error, is_error
from errwhat.domain.collection import InfoCollection
from errwhat.domain.info import InfoEntry
from errwhat.domain.protocols import StructuredContext
from errwhat.errors import MissingCauseError

E = TypeVar("E", bound=BaseException)

MAX_CALLSTACK_DEPTH = 1000


def capture_callstack(limit: int = MAX_CALLSTACK_DEPTH) -> tuple[str, ...]:
    """Return ``"file: line"`` locations, innermost first.

    Frames belonging to this module are skipped so the first location is the
    code that built the error.
    """
    frames = traceback.walk_stack(sys._getframe(1))
    outside = itertools.dropwhile(
        lambda item: item[0].f_globals.get("__name__") == __name__, frames
    )
    return tuple(
        f"{frame.f_code.co_filename}: {lineno}"
        for frame, lineno in itertools.islice(outside, limit)
    )


class StructuredError(Exception):
    """Wrap *cause* with additional info and an optional context.

    The callstack is captured only when *cause* is not itself a
    ``StructuredError``: the innermost wrapper keeps the origin.

    The cause is deliberately not exposed through ``__cause__`` and the
    implicit ``__context__`` is suppressed, so generic chain walking stops
    here. Use :meth:`matches`, :meth:`extract` or
    :func:`errwhat.get_logging_info` to look inside. Raise it plainly, not
    with ``raise ... from``.
    """

    def __init__(
        self,
        cause: BaseException,
        *additional_info: InfoEntry,
        context: StructuredContext | None = None,
    ) -> None:
        if cause is None:
            raise MissingCauseError()
        super().__init__(str(cause))
        self._cause = cause
        self._context = context
        self._additional_info = InfoCollection(additional_info)
        self._callstack: tuple[str, ...] = (
            () if isinstance(cause, StructuredError) else capture_callstack()
        )
        self.__suppress_context__ = True

    @property
    def context(self) -> StructuredContext | None:
        return self._context

    @property
    def additional_info(self) -> InfoCollection:
        return self._additional_info

    @property
    def callstack(self) -> tuple[str, ...]:
        """Locations captured at this layer, empty unless it wraps the origin."""
        return self._callstack

    @property
    def message(self) -> str:
        return str(self._cause)

    def __str__(self) -> str:
        return str(self._cause)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cause!r})"

    def matches(self, target: ErrorTarget) -> bool:
        """Check *target* against the innermost non-structured cause."""
        if isinstance(self._cause, StructuredError):
            return self._cause.matches(target)
        return is_error(self._cause, target)

    def extract(self, target_type: type[E]) -> E | None:
        if isinstance(self._cause, StructuredError):
            return self._cause.extract(target_type)
        return as_error(self._cause, target_type)

    def get_callstack(self) -> str:
        if isinstance(self._cause, StructuredError):
            return self._cause.get_callstack()
        return "\n".join(self._callstack)

    def get_additional_info(self, visited: set[int] | None = None) -> InfoCollection:
        """Collect info from this layer and every structured layer below it.

        Per layer: context info (once per context identity across the whole
        walk), then the layer's own info, then deeper layers.
        """
        if visited is None:
            visited = set()

        collected: list[InfoEntry] = []
        if self._context is not None and id(self._context) not in visited:
            visited.add(id(self._context))
            collected.extend(self._context.get_additional_info())

        collected.extend(self._additional_info)

        if isinstance(self._cause, StructuredError):
            collected.extend(self._cause.get_additional_info(visited))

        return InfoCollection(collected)
