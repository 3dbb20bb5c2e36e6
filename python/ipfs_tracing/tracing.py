"""
Span helpers for content-addressed components.

Spans are named "<component>.<operation>" (e.g. "Bitswap.GetBlocks") and may
carry one standard attribute built from a typed value. Attribute work is
skipped for spans that are not recording.

Tracing failures never reach the instrumented caller: a span that cannot be
started is replaced by a non-recording span, and attributes that cannot be
set are dropped with a warning.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Tuple

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Link, Span, SpanKind

from ipfs_tracing.attributes import (
    AttributeValue,
    BlockAttribute,
    BlockListAttribute,
    CidAttribute,
    CidListAttribute,
    IntAttribute,
    PathAttribute,
    StringAttribute,
    TypedAttribute,
)
from ipfs_tracing.types import Block, Cid, ContentPath

logger = logging.getLogger(__name__)

# Tracer name for spans started through the global provider
TRACER_NAME = "ipfs"


@dataclass
class SpanOptions:
    """Backend options applied when starting a span.

    Attributes:
        kind: Span kind (INTERNAL, CLIENT, SERVER, ...)
        parent: Explicit parent span, overrides the parent found in the context
        links: Links to spans in other traces
        start_time: Start timestamp in nanoseconds since the epoch
        attributes: Initial span attributes
    """

    kind: SpanKind = SpanKind.INTERNAL
    parent: Optional[Span] = None
    links: Sequence[Link] = field(default_factory=tuple)
    start_time: Optional[int] = None
    attributes: Optional[Mapping[str, AttributeValue]] = None


def span_name(component: str, operation: str) -> str:
    """Canonical span name for an operation of a component."""
    return f"{component}.{operation}"


class Tracing:
    """Starts spans for a component stack using an injected tracer.

    Example:
        tracing = Tracing(provider.get_tracer("ipfs"))
        ctx, span = tracing.span_with_cid_list_attribute(
            None, "Bitswap", "GetBlocks", cids
        )
        try:
            ...
        finally:
            span.end()

    The returned context holds the new span; it is not attached; callers
    pass it on explicitly or attach it themselves. Ending the span is the
    caller's job.
    """

    def __init__(self, tracer: Optional[trace.Tracer] = None):
        """Initialize with a tracer.

        Args:
            tracer: Tracer used to start spans. Defaults to the "ipfs" tracer
                of the global tracer provider.
        """
        self._tracer = tracer if tracer is not None else trace.get_tracer(TRACER_NAME)

    @property
    def tracer(self) -> trace.Tracer:
        """Tracer used to start spans."""
        return self._tracer

    def span(
        self,
        ctx: Optional[Context],
        component: str,
        operation: str,
        options: Optional[SpanOptions] = None,
    ) -> Tuple[Context, Span]:
        """Start a span named "<component>.<operation>".

        Args:
            ctx: Parent context, None for the current context
            component: Component name (e.g. "Bitswap")
            operation: Operation name (e.g. "GetBlocks")
            options: Backend span options

        Returns:
            Tuple of (context holding the new span, span)
        """
        name = span_name(component, operation)
        opts = options or SpanOptions()
        parent_ctx = ctx
        if opts.parent is not None:
            parent_ctx = trace.set_span_in_context(opts.parent, ctx)

        try:
            span = self._tracer.start_span(
                name,
                context=parent_ctx,
                kind=opts.kind,
                attributes=dict(opts.attributes) if opts.attributes else None,
                links=list(opts.links),
                start_time=opts.start_time,
            )
        except Exception as e:
            logger.warning(f"Failed to start span {name}: {e}")
            span = trace.INVALID_SPAN

        return trace.set_span_in_context(span, ctx), span

    def span_with_attribute(
        self,
        ctx: Optional[Context],
        component: str,
        operation: str,
        value: TypedAttribute,
    ) -> Tuple[Context, Span]:
        """Start a span carrying one attribute built from a typed value.

        The attribute is only computed when the span is recording.
        """
        ctx, span = self.span(ctx, component, operation)
        if span.is_recording():
            try:
                span.set_attributes(value.to_attributes())
            except Exception as e:
                logger.warning(
                    f"Failed to set {value.key} attribute on span "
                    f"{span_name(component, operation)}: {e}"
                )
        return ctx, span

    def span_with_string_attribute(
        self, ctx: Optional[Context], component: str, operation: str, key: str, value: str
    ) -> Tuple[Context, Span]:
        return self.span_with_attribute(ctx, component, operation, StringAttribute(key, value))

    def span_with_int_attribute(
        self, ctx: Optional[Context], component: str, operation: str, key: str, value: int
    ) -> Tuple[Context, Span]:
        return self.span_with_attribute(ctx, component, operation, IntAttribute(key, value))

    def span_with_path_attribute(
        self, ctx: Optional[Context], component: str, operation: str, p: ContentPath
    ) -> Tuple[Context, Span]:
        return self.span_with_attribute(ctx, component, operation, PathAttribute(p))

    def span_with_cid_attribute(
        self, ctx: Optional[Context], component: str, operation: str, c: Cid
    ) -> Tuple[Context, Span]:
        return self.span_with_attribute(ctx, component, operation, CidAttribute(c))

    def span_with_cid_list_attribute(
        self, ctx: Optional[Context], component: str, operation: str, cs: Sequence[Cid]
    ) -> Tuple[Context, Span]:
        """Start a span with a summary of a CID list ("cids" attribute)."""
        return self.span_with_attribute(ctx, component, operation, CidListAttribute(cs))

    def span_with_block_attribute(
        self, ctx: Optional[Context], component: str, operation: str, b: Block
    ) -> Tuple[Context, Span]:
        return self.span_with_attribute(ctx, component, operation, BlockAttribute(b))

    def span_with_block_list_attribute(
        self, ctx: Optional[Context], component: str, operation: str, bs: Sequence[Block]
    ) -> Tuple[Context, Span]:
        """Start a span with a summary of a block list ("blocks" attribute)."""
        return self.span_with_attribute(ctx, component, operation, BlockListAttribute(bs))


def get_tracing() -> Tracing:
    """Get a Tracing facade over the global tracer provider."""
    return Tracing(trace.get_tracer(TRACER_NAME))


# Package-level helpers over the global tracer provider


def span(
    ctx: Optional[Context],
    component: str,
    operation: str,
    options: Optional[SpanOptions] = None,
) -> Tuple[Context, Span]:
    """Start a span using the standard naming convention."""
    return get_tracing().span(ctx, component, operation, options)


def span_with_attribute(
    ctx: Optional[Context], component: str, operation: str, value: TypedAttribute
) -> Tuple[Context, Span]:
    return get_tracing().span_with_attribute(ctx, component, operation, value)


def span_with_string_attribute(
    ctx: Optional[Context], component: str, operation: str, key: str, value: str
) -> Tuple[Context, Span]:
    return get_tracing().span_with_string_attribute(ctx, component, operation, key, value)


def span_with_int_attribute(
    ctx: Optional[Context], component: str, operation: str, key: str, value: int
) -> Tuple[Context, Span]:
    return get_tracing().span_with_int_attribute(ctx, component, operation, key, value)


def span_with_path_attribute(
    ctx: Optional[Context], component: str, operation: str, p: ContentPath
) -> Tuple[Context, Span]:
    return get_tracing().span_with_path_attribute(ctx, component, operation, p)


def span_with_cid_attribute(
    ctx: Optional[Context], component: str, operation: str, c: Cid
) -> Tuple[Context, Span]:
    return get_tracing().span_with_cid_attribute(ctx, component, operation, c)


def span_with_cid_list_attribute(
    ctx: Optional[Context], component: str, operation: str, cs: Sequence[Cid]
) -> Tuple[Context, Span]:
    return get_tracing().span_with_cid_list_attribute(ctx, component, operation, cs)


def span_with_block_attribute(
    ctx: Optional[Context], component: str, operation: str, b: Block
) -> Tuple[Context, Span]:
    return get_tracing().span_with_block_attribute(ctx, component, operation, b)


def span_with_block_list_attribute(
    ctx: Optional[Context], component: str, operation: str, bs: Sequence[Block]
) -> Tuple[Context, Span]:
    return get_tracing().span_with_block_list_attribute(ctx, component, operation, bs)
