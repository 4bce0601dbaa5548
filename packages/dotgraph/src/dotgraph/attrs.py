from collections.abc import Mapping


class Attrs(dict[str, str]):
    """Attributes of a graph, subgraph, node or edge, kept in insertion order."""

    def add(self, key: str, value: str) -> None:
        self[key] = value

    def extend(self, other: Mapping[str, str] | None) -> None:
        for key, value in (other or {}).items():
            self.add(key, value)

    def copy(self) -> "Attrs":
        return Attrs(self)


class HtmlString(str):
    """A value written as a DOT HTML string; holds the text between the outer ``<`` ``>``."""

    def __repr__(self) -> str:
        return f"HtmlString({str.__repr__(self)})"
