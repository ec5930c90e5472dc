from collections.abc import Callable, Iterator

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)
from opentelemetry.trace import Tracer

from errwhat.domain.collection import InfoCollection
from errwhat.domain.info import InfoEntry


class FakeContext:
    """Minimal structured context holding a fixed list of info."""

    def __init__(self, *infos: InfoEntry) -> None:
        self._infos = InfoCollection(infos)
        self.calls = 0

    def get_additional_info(self) -> InfoCollection:
        self.calls += 1
        return self._infos


@pytest.fixture
def make_context() -> Callable[..., FakeContext]:
    """Build structured contexts holding the given info."""

    def factory(*infos: InfoEntry) -> FakeContext:
        return FakeContext(*infos)

    return factory


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter: InMemorySpanExporter) -> Iterator[Tracer]:
    """Return a tracer whose finished spans land in *span_exporter*."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    yield provider.get_tracer("tests")
    provider.shutdown()
