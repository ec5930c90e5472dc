"""A three-layer call chain showing how context and info accumulate.

``handle_request`` opens the root span, ``load_profile`` a child span, and
``fetch_remote`` stands in for a library that knows nothing about span
contexts and raises a plain exception.
"""

from __future__ import annotations

from opentelemetry import trace

from errwhat.domain.info import str_info
from errwhat.domain.structured_error import StructuredError
from errwhat.infrastructure.otel import SpanContext


class SomethingBadError(Exception):
    pass


SOMETHING_BAD = SomethingBadError("something bad happened")


class UpstreamError(Exception):
    def __str__(self) -> str:
        return str(SOMETHING_BAD)

    def matches(self, target: object) -> bool:
        return target is SOMETHING_BAD


def handle_request(tracer: trace.Tracer | None = None) -> None:
    # Continuing a distributed trace would pass trace_id/parent_id here.
    with SpanContext.root(
        "handle_request", str_info("key1", "value1"), tracer=tracer
    ) as ctx:
        try:
            load_profile(ctx)
        except Exception as exc:
            raise StructuredError(exc, str_info("error1", "value1"), context=ctx)


def load_profile(parent: SpanContext) -> None:
    with parent.child("load_profile", str_info("key2", "value2")) as ctx:
        try:
            fetch_remote(ctx)
        except Exception as exc:
            raise StructuredError(exc, str_info("error2", "value2"), context=ctx)


def fetch_remote(ctx: object) -> None:
    raise UpstreamError()
