"""Structured errors: wrap a failure in layers of context and info."""

from errwhat.application.reporting import (
    UNWRAPPED_CALLSTACK,
    LoggingInfo,
    format_error,
    get_logging_info,
)
from errwhat.domain.chain import as_error, is_error, unwrap
from errwhat.domain.collection import InfoCollection
from errwhat.domain.info import (
    InfoEntry,
    InfoKind,
    bool_info,
    bool_list_info,
    float_info,
    float_list_info,
    int_info,
    int_list_info,
    str_info,
    str_list_info,
    uint_info,
    uint_list_info,
)
from errwhat.domain.protocols import StructuredContext
from errwhat.domain.structured_error import MAX_CALLSTACK_DEPTH, StructuredError
from errwhat.errors import ErrWhatError, MissingCauseError

__all__ = [
    "MAX_CALLSTACK_DEPTH",
    "UNWRAPPED_CALLSTACK",
    "ErrWhatError",
    "InfoCollection",
    "InfoEntry",
    "InfoKind",
    "LoggingInfo",
    "MissingCauseError",
    "StructuredContext",
    "StructuredError",
    "as_error",
    "bool_info",
    "bool_list_info",
    "float_info",
    "float_list_info",
    "format_error",
    "get_logging_info",
    "int_info",
    "int_list_info",
    "is_error",
    "str_info",
    "str_list_info",
    "uint_info",
    "uint_list_info",
    "unwrap",
]
