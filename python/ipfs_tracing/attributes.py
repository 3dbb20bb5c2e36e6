"""
Span attribute conventions for content-addressed values.

Attribute keys are reserved: trace query tooling filters on them, so they
must not be reused for unrelated data.

Lists are summarized to a bounded string (first three entries plus a
remainder count) so attribute size does not grow with the collection.
"""

from dataclasses import dataclass
from itertools import islice
from typing import Any, Callable, ClassVar, Dict, Iterable, Sequence, Sized, Union

from ipfs_tracing.types import Block, Cid, ContentPath

# Reserved attribute keys
ATTR_PATH = "path"
ATTR_CID = "cid"
ATTR_CIDS = "cids"
ATTR_BLOCK = "block"
ATTR_BLOCKS = "blocks"

# Number of list entries rendered before the remainder suffix
SUMMARY_LIMIT = 3
EMPTY_LIST = "empty list"

AttributeValue = Union[str, int]


def summarize(
    items: Iterable[Any],
    render: Callable[[Any], str] = str,
    limit: int = SUMMARY_LIMIT,
) -> str:
    """Render a bounded summary of a list of identifiers.

    Args:
        items: Identifiers in their original order
        render: Canonical string form of one item
        limit: Maximum number of items rendered

    Returns:
        "empty list", or the first ``limit`` items joined by "," followed by
        " and N more" when items were left out.
    """
    if not isinstance(items, Sized):
        items = list(items)
    if len(items) == 0:
        return EMPTY_LIST

    shown = [render(item) for item in islice(items, limit)]
    value = ",".join(shown)
    if len(items) > len(shown):
        value += f" and {len(items) - len(shown)} more"
    return value


def _block_cid(block: Block) -> str:
    return str(block.cid)


def path_attribute(p: ContentPath) -> Dict[str, str]:
    """Attribute with the standard key for a content path."""
    return {ATTR_PATH: str(p)}


def cid_attribute(c: Cid) -> Dict[str, str]:
    """Attribute with the standard key for a CID."""
    return {ATTR_CID: str(c)}


def cid_list_attribute(cs: Sequence[Cid]) -> Dict[str, str]:
    """Attribute with the standard key for a list of CIDs."""
    return {ATTR_CIDS: summarize(cs)}


def block_attribute(b: Block) -> Dict[str, str]:
    """Attribute with the standard key for a block (its CID)."""
    return {ATTR_BLOCK: _block_cid(b)}


def block_list_attribute(bs: Sequence[Block]) -> Dict[str, str]:
    """Attribute with the standard key for a list of blocks (their CIDs)."""
    return {ATTR_BLOCKS: summarize(bs, render=_block_cid)}


@dataclass(frozen=True)
class StringAttribute:
    """Caller-keyed string attribute, passed through unchanged."""

    key: str
    value: str

    def to_attributes(self) -> Dict[str, AttributeValue]:
        return {self.key: self.value}


@dataclass(frozen=True)
class IntAttribute:
    """Caller-keyed integer attribute, passed through unchanged."""

    key: str
    value: int

    def to_attributes(self) -> Dict[str, AttributeValue]:
        return {self.key: self.value}


@dataclass(frozen=True)
class PathAttribute:
    path: ContentPath
    key: ClassVar[str] = ATTR_PATH

    def to_attributes(self) -> Dict[str, AttributeValue]:
        return dict(path_attribute(self.path))


@dataclass(frozen=True)
class CidAttribute:
    cid: Cid
    key: ClassVar[str] = ATTR_CID

    def to_attributes(self) -> Dict[str, AttributeValue]:
        return dict(cid_attribute(self.cid))


@dataclass(frozen=True)
class CidListAttribute:
    cids: Sequence[Cid]
    key: ClassVar[str] = ATTR_CIDS

    def to_attributes(self) -> Dict[str, AttributeValue]:
        return dict(cid_list_attribute(self.cids))


@dataclass(frozen=True)
class BlockAttribute:
    block: Block
    key: ClassVar[str] = ATTR_BLOCK

    def to_attributes(self) -> Dict[str, AttributeValue]:
        return dict(block_attribute(self.block))


@dataclass(frozen=True)
class BlockListAttribute:
    blocks: Sequence[Block]
    key: ClassVar[str] = ATTR_BLOCKS

    def to_attributes(self) -> Dict[str, AttributeValue]:
        return dict(block_list_attribute(self.blocks))


# Closed set of attribute values accepted by Tracing.span_with_attribute
TypedAttribute = Union[
    StringAttribute,
    IntAttribute,
    PathAttribute,
    CidAttribute,
    CidListAttribute,
    BlockAttribute,
    BlockListAttribute,
]
