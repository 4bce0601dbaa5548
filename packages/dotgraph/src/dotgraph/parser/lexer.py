from dataclasses import dataclass

from dotgraph.errors import DotSyntaxError


@dataclass(slots=True, frozen=True)
class Token:
    kind: str
    value: str
    position: int


SINGLE_CHAR_TOKENS = {
    "{": "LBRACE",
    "}": "RBRACE",
    "[": "LBRACKET",
    "]": "RBRACKET",
    "=": "EQUALS",
    ",": "COMMA",
    ";": "SEMICOLON",
    ":": "COLON",
}

KEYWORDS = frozenset({"strict", "graph", "digraph", "node", "edge", "subgraph"})


def lex(source: str) -> list[Token]:
    tokens: list[Token] = []
    index = 0
    length = len(source)

    while index < length:
        char = source[index]
        if char.isspace():
            index += 1
            continue

        if source.startswith("//", index) or (char == "#" and _at_line_start(source, index)):
            index = _skip_to_line_end(source, index)
            continue

        if source.startswith("/*", index):
            end = source.find("*/", index + 2)
            if end < 0:
                raise DotSyntaxError("Unterminated comment", position=index)
            index = end + 2
            continue

        if char == '"':
            start = index
            value, index = _read_string(source, index)
            value, index = _read_concatenation(source, index, value)
            tokens.append(Token("STRING", value, start))
            continue

        if char == "<":
            start = index
            value, index = _read_html(source, index)
            tokens.append(Token("HTML", value, start))
            continue

        if source.startswith("->", index) or source.startswith("--", index):
            tokens.append(Token("EDGEOP", source[index : index + 2], index))
            index += 2
            continue

        token_kind = SINGLE_CHAR_TOKENS.get(char)
        if token_kind is not None:
            tokens.append(Token(token_kind, char, index))
            index += 1
            continue

        if _is_numeral_start(source, index):
            start = index
            value, index = _read_numeral(source, index)
            tokens.append(Token("IDENT", value, start))
            continue

        if _is_identifier_start(char):
            start = index
            value, index = _read_identifier(source, index)
            tokens.append(Token("IDENT", value, start))
            continue

        raise DotSyntaxError(f"Unexpected character {char!r}", position=index)

    tokens.append(Token("EOF", "", len(source)))
    return tokens


def is_keyword(token: Token, *names: str) -> bool:
    if token.kind != "IDENT":
        return False
    value = token.value.lower()
    if names:
        return value in names
    return value in KEYWORDS


def _at_line_start(source: str, index: int) -> bool:
    line_start = source.rfind("\n", 0, index) + 1
    return not source[line_start:index].strip()


def _skip_to_line_end(source: str, index: int) -> int:
    while index < len(source) and source[index] != "\n":
        index += 1
    return index


def _read_string(source: str, index: int) -> tuple[str, int]:
    start = index
    index += 1
    result: list[str] = []

    while index < len(source):
        char = source[index]
        if char == '"':
            return "".join(result), index + 1
        if char == "\\" and index + 1 < len(source):
            following = source[index + 1]
            if following in '"\\':
                result.append(following)
            elif following == "\n":
                pass
            else:
                result.append(char + following)
            index += 2
            continue
        result.append(char)
        index += 1

    raise DotSyntaxError("Unterminated string literal", position=start)


def _read_concatenation(source: str, index: int, value: str) -> tuple[str, int]:
    while True:
        probe = index
        while probe < len(source) and source[probe].isspace():
            probe += 1
        if probe >= len(source) or source[probe] != "+":
            return value, index
        probe += 1
        while probe < len(source) and source[probe].isspace():
            probe += 1
        if probe >= len(source) or source[probe] != '"':
            raise DotSyntaxError("Expected string after '+'", position=probe)
        more, index = _read_string(source, probe)
        value += more


def _read_html(source: str, index: int) -> tuple[str, int]:
    start = index
    depth = 0
    while index < len(source):
        char = source[index]
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return source[start : index + 1], index + 1
        index += 1

    raise DotSyntaxError("Unterminated HTML string", position=start)


def _read_numeral(source: str, index: int) -> tuple[str, int]:
    start = index
    if source[index] == "-":
        index += 1
    seen_dot = False
    while index < len(source):
        char = source[index]
        if char == "." and not seen_dot:
            seen_dot = True
        elif not char.isdigit():
            break
        index += 1
    return source[start:index], index


def _read_identifier(source: str, index: int) -> tuple[str, int]:
    start = index
    while index < len(source) and _is_identifier_part(source[index]):
        index += 1
    return source[start:index], index


def _is_numeral_start(source: str, index: int) -> bool:
    rest = source[index : index + 3]
    if rest.startswith("-"):
        rest = rest[1:]
    if rest[:1].isdigit():
        return True
    return rest[:1] == "." and rest[1:2].isdigit()


def _is_identifier_start(char: str) -> bool:
    return char.isalpha() or char == "_" or ord(char) >= 0x80


def _is_identifier_part(char: str) -> bool:
    return char.isalnum() or char == "_" or ord(char) >= 0x80
