"""The in-memory graph model and its mutation API."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from dotgraph.attrs import Attrs
from dotgraph.edges import Edge, Edges
from dotgraph.errors import UnknownScopeError
from dotgraph.interfaces import GraphableNode, HasEdges, NodeLike
from dotgraph.nodes import Nodes
from dotgraph.relations import Relations
from dotgraph.subgraphs import SubGraphs

if TYPE_CHECKING:
    from dotgraph.formatter import FormatOptions
    from dotgraph.tree import DotGraph

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset({"graph", "node", "edge", "subgraph", "digraph"})
SAFE_NAME_SUFFIX = "TYPE"


def safe_name(name: str) -> str:
    """Suffix names that would otherwise read as DOT keywords."""
    if name.lower() in RESERVED_NAMES:
        return name + SAFE_NAME_SUFFIX
    return name


class Graph:
    """A DOT graph: attributes, nodes, edges, subgraphs and their memberships.

    Names passed as ``parent_graph`` are either the graph's own name or the
    name of a registered subgraph. Edges may name nodes that do not exist
    (yet), and removing a node leaves edges that reference it in place.
    """

    def __init__(self, name: str = "", directed: bool = False, strict: bool = False):
        self.attrs = Attrs()
        self.name = name
        self.directed = directed
        self.strict = strict
        self.nodes = Nodes()
        self.edges = Edges()
        self.subgraphs = SubGraphs()
        self.relations = Relations()

    def set_strict(self, strict: bool) -> None:
        self.strict = strict

    def set_directed(self, directed: bool) -> None:
        self.directed = directed

    def set_name(self, name: str) -> None:
        self.name = name

    def add_port_edge(
        self,
        src: str,
        src_port: str,
        dst: str,
        dst_port: str,
        directed: bool,
        attrs: Mapping[str, str] | None = None,
    ) -> Edge:
        edge = Edge(
            src=src,
            dst=dst,
            directed=directed,
            src_port=src_port,
            dst_port=dst_port,
            attrs=Attrs(attrs or {}),
        )
        self.edges.add(edge)
        return edge

    def add_edge(
        self, src: str, dst: str, directed: bool, attrs: Mapping[str, str] | None = None
    ) -> Edge:
        return self.add_port_edge(src, "", dst, "", directed, attrs)

    def add_edges_interface(self, source: HasEdges) -> None:
        for edge in source.edges():
            self.edges.add(edge)

    def remove_edgeless_nodes(self, parent_graph: str) -> list[str]:
        removed: list[str] = []
        for name in self.nodes.names():
            if self.edges.is_endpoint(name):
                continue
            logger.warning("removing the node: %s", name)
            self.remove_node(parent_graph, name)
            removed.append(name)
        return removed

    def add_node(
        self, parent_graph: str, name: str, attrs: Mapping[str, str] | None = None
    ) -> None:
        self.nodes.add(name, attrs)
        self.relations.add(parent_graph, name)

    def remove_node(self, parent_graph: str, name: str) -> None:
        self.nodes.remove(name)
        self.relations.remove(parent_graph, name)

    def add_node_interface(self, parent_graph: str, node: NodeLike) -> None:
        self.add_node(parent_graph, node.name, node.attrs)

    def add_graphable_node(self, parent_graph: str, node: GraphableNode) -> None:
        self.add_node_interface(parent_graph, node)
        self.add_edges_interface(node)

    def add_graphable_nodes(self, parent_graph: str, nodes: Iterable[GraphableNode]) -> None:
        for node in nodes:
            self.add_graphable_node(parent_graph, node)

    def add_attr(self, parent_graph: str, key: str, value: str) -> None:
        self._scope_attrs(parent_graph).add(key, value)

    def add_sub_graph(
        self, parent_graph: str, name: str, attrs: Mapping[str, str] | None = None
    ) -> None:
        if parent_graph != self.name and parent_graph not in self.subgraphs:
            raise UnknownScopeError(parent_graph)
        self.subgraphs.add(name)
        self.relations.add(parent_graph, name)
        for key, value in (attrs or {}).items():
            self.add_attr(name, key, value)

    def is_node(self, name: str) -> bool:
        return name in self.nodes

    def is_sub_graph(self, name: str) -> bool:
        return name in self.subgraphs

    def children(self, name: str) -> list[str]:
        return self.relations.children(name)

    def write_tree(self) -> DotGraph:
        from dotgraph.writer import TreeWriter

        return TreeWriter(self).write()

    def to_text(self, options: FormatOptions | None = None) -> str:
        from dotgraph.formatter import format_tree

        return format_tree(self.write_tree(), options)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return (
            f"Graph(name={self.name!r}, directed={self.directed}, strict={self.strict}, "
            f"nodes={len(self.nodes)}, edges={len(self.edges)}, subgraphs={len(self.subgraphs)})"
        )

    def _scope_attrs(self, graph_name: str) -> Attrs:
        if graph_name == self.name:
            return self.attrs
        subgraph = self.subgraphs.get(graph_name)
        if subgraph is None:
            raise UnknownScopeError(graph_name)
        return subgraph.attrs
