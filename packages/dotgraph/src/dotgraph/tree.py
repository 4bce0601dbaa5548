"""Ordered syntax tree handed from the tree writer to the text formatter."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass(slots=True)
class AttrStmt:
    scope: str
    key: str
    value: str


@dataclass(slots=True)
class NodeStmt:
    name: str
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class EdgeStmt:
    src: str
    dst: str
    directed: bool = True
    src_port: str = ""
    dst_port: str = ""
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class SubGraphBlock:
    name: str
    statements: list[Statement] = field(default_factory=list)

    @property
    def attrs(self) -> dict[str, str]:
        return {
            stmt.key: stmt.value for stmt in self.statements if isinstance(stmt, AttrStmt)
        }


Statement = Union[AttrStmt, NodeStmt, SubGraphBlock, EdgeStmt]


@dataclass(slots=True)
class DotGraph:
    name: str
    directed: bool = False
    strict: bool = False
    statements: list[Statement] = field(default_factory=list)

    @property
    def attrs(self) -> dict[str, str]:
        return {
            stmt.key: stmt.value for stmt in self.statements if isinstance(stmt, AttrStmt)
        }

    def walk(self) -> Iterator[Statement]:
        """Yield every statement depth-first, in output order."""
        stack = list(reversed(self.statements))
        while stack:
            stmt = stack.pop()
            yield stmt
            if isinstance(stmt, SubGraphBlock):
                stack.extend(reversed(stmt.statements))
