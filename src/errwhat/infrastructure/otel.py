"""OpenTelemetry span context that doubles as a structured-error context."""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType

from loguru import logger
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor
from opentelemetry.trace import (
    NonRecordingSpan,
    SpanKind,
    Status,
    StatusCode,
    TraceFlags,
    set_span_in_context,
)
from opentelemetry.util.types import AttributeValue

from errwhat.config import Settings
from errwhat.domain.collection import InfoCollection
from errwhat.domain.info import INT64_MAX, InfoEntry, InfoKind

_UINT64_WRAP = 2**64


def _narrow_uint(value: int) -> int:
    # otel has no unsigned attributes; reinterpret as two's complement int64
    return value - _UINT64_WRAP if value > INT64_MAX else value


def to_span_attributes(infos: Iterable[InfoEntry]) -> dict[str, AttributeValue]:
    attributes: dict[str, AttributeValue] = {}
    for info in infos:
        match info.kind:
            case InfoKind.UINT:
                attributes[info.key] = _narrow_uint(info.value)
            case InfoKind.UINT_LIST:
                attributes[info.key] = [_narrow_uint(v) for v in info.value]
            case kind if kind.is_sequence:
                attributes[info.key] = list(info.value)
            case _:
                attributes[info.key] = info.value
    return attributes


def configure_tracing(settings: Settings) -> TracerProvider | None:
    """Install a console-exporting tracer provider when tracing is enabled."""
    if not settings.otel_enabled:
        return None
    resource = Resource.create({"service.name": settings.otel_service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)
    logger.debug("Tracing enabled for service {}", settings.otel_service_name)
    return provider


class SpanContext:
    """A span plus the additional info describing the work inside it.

    Use :meth:`root` where work enters the system and :meth:`child` for nested
    work. Closing sets the span attributes and status exactly once.
    """

    def __init__(
        self,
        name: str,
        *additional_info: InfoEntry,
        tracer: trace.Tracer,
        parent: Context | None = None,
        parent_id: int | None = None,
    ) -> None:
        self.name = name
        self._tracer = tracer
        self._span = tracer.start_span(name, context=parent, kind=SpanKind.INTERNAL)
        self._parent_id = parent_id
        self._additional_info = InfoCollection(additional_info)
        self._dispatched = False

    @classmethod
    def root(
        cls,
        name: str,
        *additional_info: InfoEntry,
        trace_id: int | None = None,
        parent_id: int | None = None,
        tracer: trace.Tracer | None = None,
    ) -> SpanContext:
        """Start a root span.

        When both *trace_id* and *parent_id* come from an incoming request the
        span continues that remote trace; otherwise a new trace begins.
        """
        parent: Context | None = None
        if trace_id is not None and parent_id is not None:
            remote = trace.SpanContext(
                trace_id=trace_id,
                span_id=parent_id,
                is_remote=True,
                trace_flags=TraceFlags(TraceFlags.SAMPLED),
            )
            parent = set_span_in_context(NonRecordingSpan(remote))
        else:
            parent_id = None
        return cls(
            name,
            *additional_info,
            tracer=tracer or trace.get_tracer("default"),
            parent=parent,
            parent_id=parent_id,
        )

    def child(self, name: str, *additional_info: InfoEntry) -> SpanContext:
        return SpanContext(
            name,
            *additional_info,
            tracer=self._tracer,
            parent=set_span_in_context(self._span),
            parent_id=self.span_id,
        )

    @property
    def span(self) -> trace.Span:
        return self._span

    @property
    def trace_id(self) -> int:
        return self._span.get_span_context().trace_id

    @property
    def span_id(self) -> int:
        return self._span.get_span_context().span_id

    @property
    def parent_id(self) -> int | None:
        return self._parent_id

    def get_additional_info(self) -> InfoCollection:
        return self._additional_info

    def close(self, error: BaseException | None = None) -> None:
        if self._dispatched:
            return

        self._span.set_attributes(to_span_attributes(self._additional_info))
        if error is not None:
            self._span.set_status(Status(StatusCode.ERROR, str(error)))
        else:
            self._span.set_status(Status(StatusCode.OK))
        self._span.end()

        self._dispatched = True

    def __enter__(self) -> SpanContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close(exc)

    def __repr__(self) -> str:
        return f"SpanContext(name={self.name!r}, span_id={self.span_id:016x})"
