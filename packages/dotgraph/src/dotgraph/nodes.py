from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from dotgraph.attrs import Attrs


@dataclass(slots=True)
class Node:
    name: str
    attrs: Attrs = field(default_factory=Attrs)


class Nodes:
    def __init__(self):
        self._lookup: dict[str, Node] = {}

    def add(self, name: str, attrs: Mapping[str, str] | None = None) -> Node:
        node = self._lookup.get(name)
        if node is None:
            node = Node(name=name)
            self._lookup[name] = node
        node.attrs.extend(attrs)
        return node

    def remove(self, name: str) -> None:
        self._lookup.pop(name, None)

    def get(self, name: str) -> Node | None:
        return self._lookup.get(name)

    def contains(self, name: str) -> bool:
        return name in self._lookup

    def names(self) -> list[str]:
        return list(self._lookup)

    def __contains__(self, name: object) -> bool:
        return name in self._lookup

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._lookup.values()))

    def __len__(self) -> int:
        return len(self._lookup)
