"""
OpenTelemetry span helpers for content-addressed systems.

Provides standard span naming ("<component>.<operation>") and reserved
attribute keys for:
- Content paths ("path")
- CIDs and CID lists ("cid", "cids")
- Blocks and block lists ("block", "blocks")
"""

from ipfs_tracing.attributes import (
    ATTR_BLOCK,
    ATTR_BLOCKS,
    ATTR_CID,
    ATTR_CIDS,
    ATTR_PATH,
    BlockAttribute,
    BlockListAttribute,
    CidAttribute,
    CidListAttribute,
    IntAttribute,
    PathAttribute,
    StringAttribute,
    TypedAttribute,
    block_attribute,
    block_list_attribute,
    cid_attribute,
    cid_list_attribute,
    path_attribute,
    summarize,
)
from ipfs_tracing.tracing import (
    SpanOptions,
    Tracing,
    get_tracing,
    span,
    span_name,
    span_with_attribute,
    span_with_block_attribute,
    span_with_block_list_attribute,
    span_with_cid_attribute,
    span_with_cid_list_attribute,
    span_with_int_attribute,
    span_with_path_attribute,
    span_with_string_attribute,
)
from ipfs_tracing.types import Block, Cid, ContentPath

__all__ = [
    # Attribute keys
    "ATTR_PATH",
    "ATTR_CID",
    "ATTR_CIDS",
    "ATTR_BLOCK",
    "ATTR_BLOCKS",
    # Attributes
    "summarize",
    "path_attribute",
    "cid_attribute",
    "cid_list_attribute",
    "block_attribute",
    "block_list_attribute",
    "StringAttribute",
    "IntAttribute",
    "PathAttribute",
    "CidAttribute",
    "CidListAttribute",
    "BlockAttribute",
    "BlockListAttribute",
    "TypedAttribute",
    # Spans
    "SpanOptions",
    "Tracing",
    "get_tracing",
    "span",
    "span_name",
    "span_with_attribute",
    "span_with_string_attribute",
    "span_with_int_attribute",
    "span_with_path_attribute",
    "span_with_cid_attribute",
    "span_with_cid_list_attribute",
    "span_with_block_attribute",
    "span_with_block_list_attribute",
    # Identifier protocols
    "Cid",
    "ContentPath",
    "Block",
]
