"""
  JSON Reader, Lexer and Parser

- Programs are JSON arrays; the reader turns text into a Node tree.
- Emits Node objects rather than Python primitives so that numeric text is
  kept verbatim and converted only when evaluated:

    - arrays  -> Node(ARRAY, children)
    - strings -> Node(STRING, decoded text)
    - numbers -> Node(NUMBER, source text)
    - true/false -> Node(BOOLEAN, "true"/"false")
    - null, objects -> rejected (the language has no such values)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from orelang.errors import OreSyntaxError
from orelang.types.node import Node


TOKEN_RE = re.compile(
    r"[ \t\n\r]*(?:"
    r"(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<comma>,)"  # ,
    r"|(?P<colon>:)"  # :
    r'|(?P<string>"(?:\\.|[^\\"\x00-\x1f])*")'  # double-quoted strings
    r"|(?P<number>-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?)"  # JSON numbers, ASCII digits only
    r"|(?P<literal>true|false|null)"  # keywords
    r")",
)

_TRAILING_WS_RE = re.compile(r"[ \t\n\r]*")

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.lastgroup is None:
            # only whitespace left
            ws = _TRAILING_WS_RE.match(source, pos)
            if ws.end() == n:
                return
            raise OreSyntaxError(f"Unexpected character at {ws.end()}: {source[ws.end()]!r}")
        pos = m.end()
        yield m.lastgroup, m.group(m.lastgroup)


def _decode_string(token: str) -> str:
    body = token[1:-1]
    chars = []
    last = 0
    for m in _ESCAPE_RE.finditer(body):
        chars.append(body[last:m.start()])
        esc = m.group(1)
        if esc[0] == "u" and len(esc) == 5:
            chars.append(chr(int(esc[1:], 16)))
        elif esc in ESCAPES:
            chars.append(ESCAPES[esc])
        else:
            raise OreSyntaxError(f"Invalid escape \\{esc} in string")
        last = m.end()
    chars.append(body[last:])
    text = "".join(chars)
    # join surrogate pairs written as two \u escapes
    try:
        return text.encode("utf-16", "surrogatepass").decode("utf-16")
    except UnicodeDecodeError:
        raise OreSyntaxError("Unpaired surrogate in string") from None


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def expect(self, tok_type: str) -> str:
        found_type, found_val = self.advance()
        if found_type != tok_type:
            raise OreSyntaxError(f"Expected {tok_type}, got {found_val or 'end of input'!r}")
        return found_val

    def parse_value(self) -> Optional[Node]:
        """Parse one JSON value; None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "lbracket":
            self.advance()
            return self.parse_array()

        if tok_type == "string":
            self.advance()
            return Node.string(_decode_string(tok_val))

        if tok_type == "number":
            self.advance()
            return Node.number(tok_val)

        if tok_type == "literal":
            self.advance()
            if tok_val == "null":
                raise OreSyntaxError("null is not a value")
            return Node.boolean(tok_val)

        if tok_type == "lbrace":
            raise OreSyntaxError("objects are not supported")

        raise OreSyntaxError(f"Unexpected token {tok_val!r}")

    def parse_array(self) -> Node:
        children: list[Node] = []
        if self.peek()[0] == "rbracket":
            self.advance()
            return Node.array(children)
        while True:
            child = self.parse_value()
            if child is None:
                raise OreSyntaxError("Unterminated array")
            children.append(child)
            tok_type, tok_val = self.advance()
            if tok_type == "rbracket":
                return Node.array(children)
            if tok_type != "comma":
                raise OreSyntaxError(f"Expected ',' or ']', got {tok_val or 'end of input'!r}")


def parse(source: str) -> Node:
    """Read exactly one JSON value from `source` into a Node tree."""
    stream = TokenStream(lex(source))
    try:
        root = stream.parse_value()
    except RecursionError:
        raise OreSyntaxError("Arrays nested too deeply") from None
    if root is None:
        raise OreSyntaxError("Empty program")
    tok_type, tok_val = stream.peek()
    if tok_type is not None:
        raise OreSyntaxError(f"Unexpected trailing {tok_val!r}")
    return root
