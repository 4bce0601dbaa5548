"""Structural capabilities accepted by the graph's bulk-import operations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol, runtime_checkable

from dotgraph.edges import Edge


@runtime_checkable
class NodeLike(Protocol):
    """Anything with a node name and its attributes."""

    @property
    def name(self) -> str: ...

    @property
    def attrs(self) -> Mapping[str, str]: ...


@runtime_checkable
class HasEdges(Protocol):
    """Anything that can list the edges it declares."""

    def edges(self) -> Iterable[Edge]: ...


@runtime_checkable
class GraphableNode(NodeLike, HasEdges, Protocol):
    """A node that also carries its own edges."""
