"""Identity and type lookups along Python exception chains.

A link may take part in lookups beyond plain identity/``isinstance`` by
exposing hooks:

* ``matches(target) -> bool`` to claim equivalence with *target*;
* ``extract(target_type) -> target_type | None`` to hand out a related
  exception of the requested type.
"""

from __future__ import annotations

from typing import TypeVar

E = TypeVar("E", bound=BaseException)

ErrorTarget = BaseException | type[BaseException]


def unwrap(err: BaseException) -> BaseException | None:
    """Return the next link of *err*'s chain, as the traceback printer sees it."""
    if err.__cause__ is not None:
        return err.__cause__
    if err.__suppress_context__:
        return None
    return err.__context__


def _iter_chain(err: BaseException | None):
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap(err)


def is_error(err: BaseException | None, target: ErrorTarget) -> bool:
    """Report whether any link of *err*'s chain is, or claims to be, *target*."""
    for link in _iter_chain(err):
        if link is target:
            return True
        if isinstance(target, type) and isinstance(link, target):
            return True
        hook = getattr(link, "matches", None)
        if callable(hook) and hook(target):
            return True
    return False


def as_error(err: BaseException | None, target_type: type[E]) -> E | None:
    """Return the first link of *err*'s chain usable as *target_type*."""
    for link in _iter_chain(err):
        if isinstance(link, target_type):
            return link
        hook = getattr(link, "extract", None)
        if callable(hook):
            found = hook(target_type)
            if found is not None:
                return found
    return None
