"""
  Fez Reader: Lexer and Parser

- Streaming, lazy parsing
- Produces the evaluator's data model directly:

    - lists -> chains of Pair ending in NIL
    - dotted lists -> chains of Pair ending in the tail expression
    - symbols -> Symbol
    - #t / #f -> TRUE / FALSE
    - strings -> str
    - numbers -> int/float
    - vectors #(...) -> list
    - 'x -> (quote x)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from fez import SExpression
from fez.errors import FezSyntaxError, IncompleteInput
from fez.types.boolean import TRUE, FALSE
from fez.types.pair import NIL, Pair, from_list
from fez.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<vector>#\()"  # vector
    r"|(?P<boolean>#(?:true|false|t|f)(?![^\s()'\";]))"  # booleans
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}

QUOTE = Symbol("quote")
DOT = "."


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m and source[pos] == '"':
            raise IncompleteInput(f"Unterminated string at {pos}")
        if not m or m.end() == pos:
            raise FezSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                break


def _unescape(body: str) -> str:
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), body, flags=re.DOTALL)


def _atom(text: str) -> SExpression:
    if NUMBER_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
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
        """Read one expression; returns None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None
        self.advance()

        if tok_type == "symbol":
            if tok_val == DOT:
                raise FezSyntaxError("Unexpected '.'")
            return _atom(tok_val)

        if tok_type == "boolean":
            return TRUE if tok_val in ("#t", "#true") else FALSE

        if tok_type == "string":
            return _unescape(tok_val[1:-1])

        if tok_type == "quote":
            return Pair(QUOTE, Pair(self._require_expr("quote"), NIL))

        if tok_type == "lparen":
            return self._parse_list()

        if tok_type == "vector":
            vec = []
            while True:
                tok_type, _ = self.peek()
                if tok_type is None:
                    raise IncompleteInput("Unexpected EOF while reading vector")
                if tok_type == "rparen":
                    self.advance()
                    return vec
                vec.append(self.parse_expr())

        if tok_type == "rparen":
            raise FezSyntaxError("Unmatched ')'")

        raise FezSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def _require_expr(self, context: str) -> SExpression:
        if self.peek()[0] is None:
            raise IncompleteInput(f"Expected an expression after {context}")
        if self.peek()[0] == "rparen":
            raise FezSyntaxError(f"Expected an expression after {context}")
        return self.parse_expr()

    def _parse_list(self) -> SExpression:
        items = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise IncompleteInput("Unmatched '('")
            if tok_type == "rparen":
                self.advance()
                return from_list(items)
            if tok_type == "symbol" and tok_val == DOT:
                if not items:
                    raise FezSyntaxError("Unexpected '.' at start of list")
                self.advance()
                tail = self._require_expr("'.'")
                if self.peek()[0] is None:
                    raise IncompleteInput("Unmatched '('")
                if self.peek()[0] != "rparen":
                    raise FezSyntaxError("Expected ')' after dotted cdr")
                self.advance()
                return from_list(items, tail)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> Iterator[SExpression]:
    """Read every expression in `source`."""
    return TokenStream(lex(source)).parse_all()
