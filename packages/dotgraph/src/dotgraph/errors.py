"""Error hierarchy for the graph model, tree writer and DOT front end."""

from __future__ import annotations


class DotGraphError(Exception):
    """Base error for everything raised by dotgraph."""


class UnknownScopeError(DotGraphError):
    """A graph or subgraph name that was never registered was used as a scope."""

    def __init__(self, name: str):
        super().__init__(f"graph or subgraph {name!r} does not exist")
        self.name = name


class RelationCycleError(DotGraphError):
    """Subgraph membership loops back on itself."""

    def __init__(self, path: list[str]):
        super().__init__("subgraph relation cycle: " + " -> ".join(path))
        self.path = path


class DotSyntaxError(DotGraphError, ValueError):
    """Malformed DOT source."""

    def __init__(self, message: str, *, position: int | None = None):
        if position is not None:
            message = f"{message} at {position}"
        super().__init__(message)
        self.position = position
