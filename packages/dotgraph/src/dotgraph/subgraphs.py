from collections.abc import Iterator
from dataclasses import dataclass, field

from dotgraph.attrs import Attrs


@dataclass(slots=True)
class SubGraph:
    name: str
    attrs: Attrs = field(default_factory=Attrs)


class SubGraphs:
    def __init__(self):
        self._subgraphs: dict[str, SubGraph] = {}

    def add(self, name: str) -> SubGraph:
        subgraph = self._subgraphs.get(name)
        if subgraph is None:
            subgraph = SubGraph(name=name)
            self._subgraphs[name] = subgraph
        return subgraph

    def get(self, name: str) -> SubGraph | None:
        return self._subgraphs.get(name)

    def contains(self, name: str) -> bool:
        return name in self._subgraphs

    def names(self) -> list[str]:
        return list(self._subgraphs)

    def __contains__(self, name: object) -> bool:
        return name in self._subgraphs

    def __iter__(self) -> Iterator[SubGraph]:
        return iter(list(self._subgraphs.values()))

    def __len__(self) -> int:
        return len(self._subgraphs)
