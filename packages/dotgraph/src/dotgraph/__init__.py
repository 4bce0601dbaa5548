from dotgraph.attrs import Attrs, HtmlString
from dotgraph.edges import Edge, Edges
from dotgraph.errors import DotGraphError, DotSyntaxError, RelationCycleError, UnknownScopeError
from dotgraph.formatter import FormatOptions, format_tree
from dotgraph.graph import RESERVED_NAMES, Graph, safe_name
from dotgraph.interfaces import GraphableNode, HasEdges, NodeLike
from dotgraph.io import normalize, read_dot, write_dot
from dotgraph.nodes import Node, Nodes
from dotgraph.parser import parse_dot
from dotgraph.relations import Relations
from dotgraph.subgraphs import SubGraph, SubGraphs
from dotgraph.tree import AttrStmt, DotGraph, EdgeStmt, NodeStmt, SubGraphBlock
from dotgraph.writer import TreeWriter

__all__ = [
    "AttrStmt",
    "Attrs",
    "DotGraph",
    "DotGraphError",
    "DotSyntaxError",
    "Edge",
    "EdgeStmt",
    "Edges",
    "FormatOptions",
    "Graph",
    "GraphableNode",
    "HtmlString",
    "HasEdges",
    "Node",
    "NodeLike",
    "NodeStmt",
    "Nodes",
    "RESERVED_NAMES",
    "RelationCycleError",
    "Relations",
    "SubGraph",
    "SubGraphBlock",
    "SubGraphs",
    "TreeWriter",
    "UnknownScopeError",
    "format_tree",
    "normalize",
    "parse_dot",
    "read_dot",
    "safe_name",
    "write_dot",
]
