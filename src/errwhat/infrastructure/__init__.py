from __future__ import annotations

from .error_utils import log_and_wrap, wrap_exceptions
from .logs import configure_logging, log_error
from .otel import SpanContext, configure_tracing, to_span_attributes

__all__ = [
    "SpanContext",
    "configure_logging",
    "configure_tracing",
    "log_and_wrap",
    "log_error",
    "to_span_attributes",
    "wrap_exceptions",
]
