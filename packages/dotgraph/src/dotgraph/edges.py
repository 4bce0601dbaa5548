from collections.abc import Iterator
from dataclasses import dataclass, field

from dotgraph.attrs import Attrs


@dataclass(slots=True)
class Edge:
    src: str
    dst: str
    directed: bool = True
    src_port: str = ""
    dst_port: str = ""
    attrs: Attrs = field(default_factory=Attrs)


class Edges:
    """Edges in insertion order, indexed by source node name."""

    def __init__(self):
        self._edges: list[Edge] = []
        self._src_to_dsts: dict[str, dict[str, None]] = {}

    def add(self, edge: Edge) -> None:
        self._edges.append(edge)
        self._src_to_dsts.setdefault(edge.src, {})[edge.dst] = None

    def edges(self) -> list[Edge]:
        return list(self._edges)

    def edges_from(self, name: str) -> set[str]:
        return set(self._src_to_dsts.get(name, ()))

    def has_source(self, name: str) -> bool:
        return name in self._src_to_dsts

    def has_destination(self, name: str) -> bool:
        # Full scan, there is no destination index.
        return any(name in dsts for dsts in self._src_to_dsts.values())

    def is_endpoint(self, name: str) -> bool:
        return self.has_source(name) or self.has_destination(name)

    def __iter__(self) -> Iterator[Edge]:
        return iter(list(self._edges))

    def __len__(self) -> int:
        return len(self._edges)
