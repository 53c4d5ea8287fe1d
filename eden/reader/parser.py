"""
  Lisp Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits Eden values directly (code is data):

    - integers -> int (signed 64-bit range)
    - strings -> str
    - #t / #f -> bool
    - symbols -> Symbol
    - lists -> Python list
    - dotted lists -> DottedList(head, tail), normalized
    - 'datum -> Quoted(datum)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from eden import SExpression
from eden.errors import EdenSyntaxError, EdenIncompleteInput
from eden.types.symbol import Symbol
from eden.types.values import INT_MIN, INT_MAX, Quoted, make_dotted


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ml_start>#\|)"  # multi-line comment start
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # string with no closing quote
    r"|(?P<atom>[^\s()'\";]+)"  # numbers, booleans, dot and symbols
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?[0-9]+")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#f": False,
}


def _classify_atom(text: str) -> str:
    if text == ".":
        return "dot"
    if text in BOOLEANS:
        return "boolean"
    if NUMBER_RE.fullmatch(text):
        return "number"
    return "symbol"


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            if source[pos:].isspace():
                break
            raise EdenSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")

        if m.group("comment") is not None:
            pos = m.end()
            continue

        if m.group("ml_start") is not None:
            pos = m.end()
            depth = 1
            while depth > 0:
                if pos >= n:
                    raise EdenIncompleteInput("Unterminated multi-line comment")
                if source.startswith("#|", pos):
                    depth += 1
                    pos += 2
                elif source.startswith("|#", pos):
                    depth -= 1
                    pos += 2
                else:
                    pos += 1
            continue

        if m.group("open_string") is not None:
            raise EdenIncompleteInput("Unterminated string literal")

        for nm in ("quote", "lparen", "rparen", "string", "atom"):
            value = m.group(nm)
            if value is not None:
                yield (_classify_atom(value) if nm == "atom" else nm), value
                break
        pos = m.end()


def _unescape(body: str) -> str:
    def replace(match: re.Match) -> str:
        ch = match.group(1)
        if ch not in STRING_ESCAPES:
            raise EdenSyntaxError(f"Unknown string escape: \\{ch}")
        return STRING_ESCAPES[ch]

    return re.sub(r"\\(.)", replace, body, flags=re.DOTALL)


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

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None
        self.advance()

        if tok_type == "number":
            n = int(tok_val)
            if n < INT_MIN or n > INT_MAX:
                raise EdenSyntaxError(f"Integer literal out of range: {tok_val}")
            return n

        if tok_type == "boolean":
            return BOOLEANS[tok_val]

        if tok_type == "symbol":
            return Symbol(tok_val)

        if tok_type == "string":
            return _unescape(tok_val[1:-1])

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise EdenIncompleteInput("Expected an expression after quote")
            return Quoted(self.parse_expr())

        # List or dotted list
        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt is None:
                    raise EdenIncompleteInput("Unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return items
                if nxt == "dot":
                    self.advance()
                    if not items:
                        raise EdenSyntaxError("Dotted list needs at least one element before '.'")
                    if self.peek()[0] is None:
                        raise EdenIncompleteInput("Expected an expression after '.'")
                    cdr_expr = self.parse_expr()
                    closing = self.peek()[0]
                    if closing is None:
                        raise EdenIncompleteInput("Unmatched '('")
                    if closing != "rparen":
                        raise EdenSyntaxError("Expected ')' after dotted cdr")
                    self.advance()
                    return make_dotted(items, cdr_expr)
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise EdenSyntaxError("Unexpected ')'")
        if tok_type == "dot":
            raise EdenSyntaxError("Unexpected '.'")

        raise EdenSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Parse exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    if stream.peek()[0] is None:
        raise EdenSyntaxError("Expected an expression, got end of input")
    expr = stream.parse_expr()
    if stream.peek()[0] is not None:
        raise EdenSyntaxError(f"Unexpected input after expression: {stream.peek()[1]!r}")
    return expr


def read_all(source: str) -> list[SExpression]:
    """Parse every top-level expression in `source`, in order."""
    return list(TokenStream(lex(source)).parse_all())
