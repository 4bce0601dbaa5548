from __future__ import annotations

from dataclasses import dataclass, field

from dotgraph.attrs import Attrs, HtmlString
from dotgraph.errors import DotSyntaxError
from dotgraph.graph import Graph
from dotgraph.parser.lexer import Token, is_keyword, lex

ID_KINDS = {"IDENT", "STRING", "HTML"}


@dataclass(slots=True)
class _Scope:
    name: str
    parent: _Scope | None = None
    node_defaults: Attrs = field(default_factory=Attrs)
    edge_defaults: Attrs = field(default_factory=Attrs)

    def child(self, name: str) -> _Scope:
        return _Scope(
            name=name,
            parent=self,
            node_defaults=self.node_defaults.copy(),
            edge_defaults=self.edge_defaults.copy(),
        )


@dataclass(slots=True)
class _Endpoint:
    name: str
    port: str = ""


class DotParser:
    """Reads DOT source and replays it onto a Graph through its mutation API."""

    def __init__(self, source: str):
        self._tokens = lex(source)
        self._index = 0
        self._graph = Graph()
        self._members: dict[str, list[str]] = {}
        self._anonymous = 0

    def parse(self) -> Graph:
        graph = self._graph
        if is_keyword(self._peek(), "strict"):
            self._consume()
            graph.set_strict(True)

        token = self._peek()
        if not is_keyword(token, "graph", "digraph"):
            raise DotSyntaxError("Expected 'graph' or 'digraph'", position=token.position)
        graph.set_directed(self._consume().value.lower() == "digraph")

        if self._peek().kind in ID_KINDS:
            graph.set_name(self._expect_id())
        self._expect("LBRACE")
        self._parse_statements(_Scope(name=graph.name))
        self._expect("RBRACE")
        self._expect("EOF")
        return graph

    def _parse_statements(self, scope: _Scope) -> None:
        while self._peek().kind not in {"RBRACE", "EOF"}:
            self._parse_statement(scope)
            if self._peek().kind == "SEMICOLON":
                self._consume()

    def _parse_statement(self, scope: _Scope) -> None:
        token = self._peek()

        if is_keyword(token, "graph", "node", "edge"):
            self._consume()
            attrs = self._parse_attr_list()
            kind = token.value.lower()
            if kind == "graph":
                for key, value in attrs.items():
                    self._graph.add_attr(scope.name, key, value)
            elif kind == "node":
                scope.node_defaults.extend(attrs)
            else:
                scope.edge_defaults.extend(attrs)
            return

        if is_keyword(token, "subgraph") or token.kind == "LBRACE":
            operand = [_Endpoint(name) for name in self._parse_subgraph(scope)]
            if self._peek().kind == "EDGEOP":
                self._parse_edge_statement(scope, operand)
            return

        if token.kind not in ID_KINDS or is_keyword(token):
            raise DotSyntaxError("Expected statement", position=token.position)

        if self._peek(1).kind == "EQUALS":
            key = self._expect_id()
            self._expect("EQUALS")
            self._graph.add_attr(scope.name, key, self._expect_id())
            return

        endpoint = self._parse_node_id()
        if self._peek().kind == "EDGEOP":
            self._declare_node(scope, endpoint.name, {}, from_edge=True)
            self._parse_edge_statement(scope, [endpoint])
            return

        self._declare_node(scope, endpoint.name, self._parse_attr_list(optional=True))

    def _parse_edge_statement(self, scope: _Scope, first: list[_Endpoint]) -> None:
        operands = [first]
        directions: list[bool] = []
        while self._peek().kind == "EDGEOP":
            directions.append(self._consume().value == "->")
            if is_keyword(self._peek(), "subgraph") or self._peek().kind == "LBRACE":
                names = self._parse_subgraph(scope)
                operands.append([_Endpoint(name) for name in names])
            else:
                endpoint = self._parse_node_id()
                self._declare_node(scope, endpoint.name, {}, from_edge=True)
                operands.append([endpoint])

        attrs = scope.edge_defaults.copy()
        attrs.extend(self._parse_attr_list(optional=True))

        for index, directed in enumerate(directions):
            for src in operands[index]:
                for dst in operands[index + 1]:
                    self._graph.add_port_edge(
                        src.name, src.port, dst.name, dst.port, directed, attrs
                    )

    def _parse_subgraph(self, scope: _Scope) -> list[str]:
        name = None
        if is_keyword(self._peek(), "subgraph"):
            self._consume()
            if self._peek().kind in ID_KINDS and not is_keyword(self._peek()):
                name = self._expect_id()
        if name is None:
            name = self._anonymous_name()

        self._graph.add_sub_graph(scope.name, name)
        members = self._members.setdefault(name, [])
        if self._peek().kind != "LBRACE":
            return list(members)

        self._expect("LBRACE")
        self._parse_statements(scope.child(name))
        self._expect("RBRACE")
        return list(members)

    def _declare_node(
        self, scope: _Scope, name: str, attrs: dict[str, str], from_edge: bool = False
    ) -> None:
        if self._graph.is_node(name):
            # Edge endpoints at the top level do not pull a node out of its subgraph.
            if not (from_edge and scope.parent is None):
                self._graph.add_node(scope.name, name, attrs)
        else:
            merged = scope.node_defaults.copy()
            merged.extend(attrs)
            self._graph.add_node(scope.name, name, merged)

        current: _Scope | None = scope
        while current is not None and current.parent is not None:
            members = self._members.setdefault(current.name, [])
            if name not in members:
                members.append(name)
            current = current.parent

    def _parse_node_id(self) -> _Endpoint:
        endpoint = _Endpoint(self._expect_id())
        if self._peek().kind == "COLON":
            self._consume()
            endpoint.port = self._expect_id()
            if self._peek().kind == "COLON":
                self._consume()
                endpoint.port += ":" + self._expect_id()
        return endpoint

    def _parse_attr_list(self, optional: bool = False) -> dict[str, str]:
        if optional and self._peek().kind != "LBRACKET":
            return {}
        if self._peek().kind != "LBRACKET":
            raise DotSyntaxError("Expected attribute list", position=self._peek().position)

        attrs: dict[str, str] = {}
        while self._peek().kind == "LBRACKET":
            self._consume()
            while self._peek().kind != "RBRACKET":
                key = self._expect_id()
                value = "true"
                if self._peek().kind == "EQUALS":
                    self._consume()
                    value = self._expect_id()
                attrs[key] = value
                if self._peek().kind in {"COMMA", "SEMICOLON"}:
                    self._consume()
            self._expect("RBRACKET")
        return attrs

    def _anonymous_name(self) -> str:
        while True:
            self._anonymous += 1
            name = f"anonymous{self._anonymous}"
            if not self._graph.is_sub_graph(name):
                return name

    def _expect_id(self) -> str:
        token = self._peek()
        if token.kind not in ID_KINDS or is_keyword(token):
            raise DotSyntaxError("Expected identifier", position=token.position)
        self._consume()
        if token.kind == "HTML":
            return HtmlString(token.value[1:-1])
        return token.value

    def _expect(self, kind: str) -> Token:
        token = self._peek()
        if token.kind != kind:
            raise DotSyntaxError(f"Expected {kind}", position=token.position)
        return self._consume()

    def _peek(self, offset: int = 0) -> Token:
        index = min(self._index + offset, len(self._tokens) - 1)
        return self._tokens[index]

    def _consume(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token


def parse_dot(source: str) -> Graph:
    return DotParser(source).parse()
