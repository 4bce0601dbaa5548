from pathlib import Path

from dotgraph.formatter import FormatOptions
from dotgraph.graph import Graph
from dotgraph.parser import parse_dot


def read_dot(path: str | Path) -> Graph:
    return parse_dot(Path(path).read_text(encoding="utf-8"))


def write_dot(path: str | Path, graph: Graph, options: FormatOptions | None = None) -> None:
    output_path = Path(path)
    output_path.write_text(graph.to_text(options), encoding="utf-8")


def normalize(
    source: str, prune_edgeless: bool = False, options: FormatOptions | None = None
) -> str:
    graph = parse_dot(source)
    if prune_edgeless:
        graph.remove_edgeless_nodes(graph.name)
    return graph.to_text(options)
