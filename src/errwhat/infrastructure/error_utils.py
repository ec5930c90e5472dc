from __future__ import annotations

import asyncio
import functools
import inspect
from collections.abc import Callable
from typing import NoReturn, ParamSpec, TypeVar

from loguru import logger

from errwhat.domain.info import InfoEntry
from errwhat.domain.protocols import StructuredContext
from errwhat.domain.structured_error import StructuredError
from errwhat.infrastructure.logs import log_error

P = ParamSpec("P")
R = TypeVar("R")


def log_and_wrap(
    exc: BaseException,
    *additional_info: InfoEntry,
    context: StructuredContext | None = None,
    log=logger,  # loguru logger-like
) -> NoReturn:
    wrapped = StructuredError(exc, *additional_info, context=context)
    log_error(wrapped, log=log)
    raise wrapped


def wrap_exceptions(
    *additional_info: InfoEntry,
    context: StructuredContext | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator wrapping escaping errors into :class:`StructuredError`."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    logger.opt(exception=exc).debug(
                        "Wrapping error raised by {}", func.__qualname__
                    )
                    raise StructuredError(exc, *additional_info, context=context)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                logger.opt(exception=exc).debug(
                    "Wrapping error raised by {}", func.__qualname__
                )
                raise StructuredError(exc, *additional_info, context=context)

        return sync_wrapper  # type: ignore[return-value]

    return decorator
