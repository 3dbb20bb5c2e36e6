"""
Identifier protocols for traced values.

The tracing helpers never parse or validate identifiers. A CID or a content
path is anything whose ``str()`` is its canonical form; a block is anything
exposing the CID it is addressed by.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Cid(Protocol):
    """Content address with a canonical string form (e.g. ``bafy...``)."""

    def __str__(self) -> str: ...


@runtime_checkable
class ContentPath(Protocol):
    """Content path such as ``/ipfs/<cid>/a/b`` or ``/ipns/<name>``."""

    def __str__(self) -> str: ...


@runtime_checkable
class Block(Protocol):
    """Content-addressed chunk of data."""

    @property
    def cid(self) -> Any: ...
