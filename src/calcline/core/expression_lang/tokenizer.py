"""
Tokenizer for the calcline expression language.

Converts an input line into a sequence of typed tokens.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

from calcline.core.errors import InvalidNumber, UnexpectedCharacter
from calcline.core.formatting import format_number


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()


OPERATOR_KINDS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH})


class Token:
    """A single token from the expression tokenizer.

    Equality ignores ``pos`` so token streams compare equal regardless of
    surrounding whitespace.
    """

    __slots__ = ("kind", "text", "pos", "value")

    def __init__(self, kind: TokenKind, text: str, pos: int, value: float | None = None) -> None:
        self.kind = kind
        self.text = text
        self.pos = pos
        self.value = value

    @property
    def end(self) -> int:
        return self.pos + len(self.text)

    @property
    def is_operator(self) -> bool:
        return self.kind in OPERATOR_KINDS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER and self.value is not None:
            return format_number(self.value)
        return self.text

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, pos={self.pos})"


_OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}

_WHITESPACE = " \t\n\r"

# A digit followed by any run of digits and decimal points; validated below
_NUMBER_RE = re.compile(r"[0-9][0-9.]*")


def tokenize(source: str) -> list[Token]:
    """Tokenize an input line into a list of tokens.

    Raises:
        UnexpectedCharacter: For any character outside the alphabet.
        InvalidNumber: For a numeric run with more than one decimal point.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        # Skip whitespace
        if c in _WHITESPACE:
            i += 1
            continue

        # Numbers
        if "0" <= c <= "9":
            m = _NUMBER_RE.match(source, i)
            assert m is not None
            tokens.append(_read_number(m.group(0), i))
            i = m.end()
            continue

        # Single-character operators
        if c in _OPERATORS:
            tokens.append(Token(_OPERATORS[c], c, i))
            i += 1
            continue

        raise UnexpectedCharacter(c, i)

    return tokens


def _read_number(text: str, pos: int) -> Token:
    """Convert a consumed numeric run to a NUMBER token."""
    if text.count(".") > 1:
        raise InvalidNumber(text, pos)
    try:
        value = float(text)
    except ValueError as e:
        raise InvalidNumber(text, pos) from e
    return Token(TokenKind.NUMBER, text, pos, value)
