"""Render a syntax tree as DOT text."""

from __future__ import annotations

import re
from dataclasses import dataclass

from dotgraph.attrs import HtmlString
from dotgraph.parser.lexer import KEYWORDS
from dotgraph.tree import AttrStmt, DotGraph, EdgeStmt, NodeStmt, Statement, SubGraphBlock

_IDENTIFIER = re.compile(r"[A-Za-z_\u0080-\uffff][A-Za-z0-9_\u0080-\uffff]*")
_NUMERAL = re.compile(r"-?(\.[0-9]+|[0-9]+(\.[0-9]*)?)")


@dataclass(frozen=True, slots=True)
class FormatOptions:
    indent: str = "\t"


def format_tree(tree: DotGraph, options: FormatOptions | None = None) -> str:
    opts = options or FormatOptions()
    header = "digraph" if tree.directed else "graph"
    if tree.strict:
        header = "strict " + header
    if tree.name:
        header += " " + quote_id(tree.name)

    lines = [header + " {"]
    for stmt in tree.statements:
        _format_statement(stmt, 1, opts, lines)
    lines.append("}")
    return "\n".join(lines) + "\n"


def quote_id(value: str) -> str:
    if isinstance(value, HtmlString):
        html = "<" + value + ">"
        if _closes_at_end(html):
            return html
    elif value.lower() not in KEYWORDS and (
        _IDENTIFIER.fullmatch(value) or _NUMERAL.fullmatch(value)
    ):
        return value
    return '"' + _escape(value) + '"'


def _format_statement(stmt: Statement, depth: int, opts: FormatOptions, lines: list[str]) -> None:
    pad = opts.indent * depth
    if isinstance(stmt, AttrStmt):
        lines.append(f"{pad}{quote_id(stmt.key)}={quote_id(stmt.value)};")
    elif isinstance(stmt, NodeStmt):
        lines.append(f"{pad}{quote_id(stmt.name)}{_attr_list(stmt.attrs)};")
    elif isinstance(stmt, EdgeStmt):
        op = "->" if stmt.directed else "--"
        src = _endpoint(stmt.src, stmt.src_port)
        dst = _endpoint(stmt.dst, stmt.dst_port)
        lines.append(f"{pad}{src} {op} {dst}{_attr_list(stmt.attrs)};")
    elif isinstance(stmt, SubGraphBlock):
        if not stmt.statements:
            lines.append(f"{pad}subgraph {quote_id(stmt.name)} {{}}")
            return
        lines.append(f"{pad}subgraph {quote_id(stmt.name)} {{")
        for child in stmt.statements:
            _format_statement(child, depth + 1, opts, lines)
        lines.append(pad + "}")
    else:
        raise TypeError(f"Unsupported statement: {stmt!r}")


def _attr_list(attrs: dict[str, str]) -> str:
    if not attrs:
        return ""
    body = ", ".join(f"{quote_id(key)}={quote_id(value)}" for key, value in attrs.items())
    return f" [{body}]"


def _endpoint(name: str, port: str) -> str:
    if not port:
        return quote_id(name)
    return ":".join([quote_id(name)] + [quote_id(part) for part in port.split(":")])


def _escape(value: str) -> str:
    # A backslash is doubled only where the lexer would otherwise pair it up.
    out: list[str] = []
    for index, char in enumerate(value):
        if char == '"':
            out.append('\\"')
        elif char == "\\" and value[index + 1 : index + 2] in ("", "\\", '"', "\n"):
            out.append("\\\\")
        else:
            out.append(char)
    return "".join(out)


def _closes_at_end(html: str) -> bool:
    depth = 0
    for index, char in enumerate(html):
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return index == len(html) - 1
    return False
