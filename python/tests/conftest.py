"""
Shared fixtures for ipfs_tracing tests.
"""

from dataclasses import dataclass
from typing import Any, List, Optional
from unittest.mock import Mock

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_OFF
from opentelemetry.trace import Span


@dataclass(frozen=True)
class FakeCid:
    """CID stand-in whose canonical form is its value."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FakePath:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FakeBlock:
    cid: FakeCid
    data: bytes = b""


class CountingCid:
    """CID that records how often it was rendered."""

    def __init__(self, value: str):
        self.value = value
        self.renders = 0

    def __str__(self) -> str:
        self.renders += 1
        return self.value


class StubTracer:
    """Tracer returning a fixed span and recording start_span calls."""

    def __init__(self, span: Optional[Any] = None, error: Optional[Exception] = None):
        self.span = span
        self.error = error
        self.calls: List[dict] = []

    def start_span(self, name: str, **kwargs: Any) -> Any:
        self.calls.append({"name": name, **kwargs})
        if self.error is not None:
            raise self.error
        return self.span


def make_cids(n: int) -> List[FakeCid]:
    return [FakeCid(f"bafy{i}") for i in range(n)]


@pytest.fixture
def exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def provider(exporter: InMemorySpanExporter) -> TracerProvider:
    """Private recording provider (the global provider is left untouched)."""
    tp = TracerProvider()
    tp.add_span_processor(SimpleSpanProcessor(exporter))
    yield tp
    tp.shutdown()


@pytest.fixture
def tracing(provider: TracerProvider):
    from ipfs_tracing.tracing import Tracing

    return Tracing(provider.get_tracer("test"))


@pytest.fixture
def unsampled_tracing():
    """Tracing over a provider that drops every span."""
    from ipfs_tracing.tracing import Tracing

    tp = TracerProvider(sampler=ALWAYS_OFF)
    yield Tracing(tp.get_tracer("test"))
    tp.shutdown()


@pytest.fixture
def non_recording_span() -> Mock:
    span = Mock(spec=Span)
    span.is_recording.return_value = False
    return span


@pytest.fixture
def recording_span() -> Mock:
    span = Mock(spec=Span)
    span.is_recording.return_value = True
    return span
