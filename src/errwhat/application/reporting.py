from __future__ import annotations

from typing import Any, NamedTuple

from errwhat.domain.collection import InfoCollection
from errwhat.domain.structured_error import StructuredError

UNWRAPPED_CALLSTACK = "unwrapped error - no callstack"


class LoggingInfo(NamedTuple):
    """The parts of an error a logging or tracing sink needs separately."""

    cause: str
    callstack: str
    additional_info: InfoCollection


def get_logging_info(err: BaseException) -> LoggingInfo:
    if isinstance(err, StructuredError):
        return LoggingInfo(
            cause=str(err),
            callstack=err.get_callstack(),
            additional_info=err.get_additional_info().flatten(),
        )
    return LoggingInfo(
        cause=str(err),
        callstack=UNWRAPPED_CALLSTACK,
        additional_info=InfoCollection(),
    )


def _format_value(value: Any) -> str:
    if isinstance(value, tuple):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    return str(value)


def format_error(err: BaseException) -> str:
    """Render *err* for humans: cause, sorted additional info, callstack."""
    if not isinstance(err, StructuredError):
        return f"Unknown error: {err}\n"

    callstack = err.get_callstack()
    additional_info = err.get_additional_info().to_json()

    lines = [f"Cause: {err}\n"]
    if additional_info:
        lines.append("Additional Info:\n")
        for key in sorted(additional_info):
            lines.append(f"\t{key}: {_format_value(additional_info[key])}\n")
    lines.append("Callstack:\n\t" + callstack.replace("\n", "\n\t") + "\n")
    return "".join(lines)
