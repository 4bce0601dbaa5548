from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dotgraph.attrs import Attrs
from dotgraph.errors import RelationCycleError
from dotgraph.graph import safe_name
from dotgraph.tree import AttrStmt, DotGraph, EdgeStmt, NodeStmt, Statement, SubGraphBlock

if TYPE_CHECKING:
    from dotgraph.edges import Edge
    from dotgraph.graph import Graph

logger = logging.getLogger(__name__)


class TreeWriter:
    """Builds the ordered syntax tree for a graph.

    Statements come out as: graph attributes, the graph's children in
    membership order (subgraphs written recursively where they appear), any
    subgraphs and nodes not reachable from the graph's name, then every edge
    in insertion order.
    """

    def __init__(self, graph: Graph):
        self._graph = graph
        self._written_nodes: set[str] = set()
        self._written_subgraphs: set[str] = set()
        self._path: list[str] = []

    def write(self) -> DotGraph:
        graph = self._graph
        self._written_nodes.clear()
        self._written_subgraphs.clear()
        self._path.clear()

        tree = DotGraph(
            name=safe_name(graph.name),
            directed=graph.directed,
            strict=graph.strict,
        )
        tree.statements.extend(_attr_stmts(graph.name, graph.attrs))
        tree.statements.extend(self._children(graph.name))

        for subgraph in graph.subgraphs:
            if subgraph.name not in self._written_subgraphs:
                tree.statements.append(self._subgraph(subgraph.name))
        for node in graph.nodes:
            if node.name not in self._written_nodes:
                tree.statements.append(self._node(node.name))

        tree.statements.extend(_edge_stmt(edge) for edge in graph.edges)
        return tree

    def _children(self, parent: str) -> list[Statement]:
        graph = self._graph
        statements: list[Statement] = []
        for child in graph.relations.children(parent):
            if graph.is_node(child):
                statements.append(self._node(child))
            if graph.is_sub_graph(child):
                statements.append(self._subgraph(child))
            if not (graph.is_node(child) or graph.is_sub_graph(child)):
                logger.debug("skipping stale relation %s -> %s", parent, child)
        return statements

    def _node(self, name: str) -> NodeStmt:
        self._written_nodes.add(name)
        node = self._graph.nodes.get(name)
        return NodeStmt(name=safe_name(name), attrs=dict(node.attrs))

    def _subgraph(self, name: str) -> SubGraphBlock:
        if name in self._path:
            cycle = self._path[self._path.index(name) :] + [name]
            raise RelationCycleError(cycle)

        block = SubGraphBlock(name=safe_name(name))
        if name in self._written_subgraphs:
            return block

        self._written_subgraphs.add(name)
        self._path.append(name)
        try:
            subgraph = self._graph.subgraphs.get(name)
            block.statements.extend(_attr_stmts(name, subgraph.attrs))
            block.statements.extend(self._children(name))
        finally:
            self._path.pop()
        return block


def _attr_stmts(scope: str, attrs: Attrs) -> list[AttrStmt]:
    return [AttrStmt(scope=safe_name(scope), key=key, value=value) for key, value in attrs.items()]


def _edge_stmt(edge: Edge) -> EdgeStmt:
    return EdgeStmt(
        src=safe_name(edge.src),
        dst=safe_name(edge.dst),
        directed=edge.directed,
        src_port=edge.src_port,
        dst_port=edge.dst_port,
        attrs=dict(edge.attrs),
    )
