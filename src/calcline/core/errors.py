"""
Error types for the calcline tokenizer, parser, and evaluator.

Each pipeline stage has its own family so callers can tell a lexical
failure from a syntactic one from an arithmetic one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Source location of an error within a single input line.

    Attributes:
        source: The full input line
        pos: Character offset of the error (0-indexed)
    """

    source: str
    pos: int

    def format(self) -> str:
        """
        Format the source line with a caret under the error position.

        Returns:
            Two lines like "3 & 2" and "  ^"
        """
        line = self.source.rstrip("\r\n")
        marker_pos = min(max(self.pos, 0), len(line))
        return f"{line}\n{' ' * marker_pos}^"


class CalcError(Exception):
    """Base exception for all calcline errors."""

    kind = "error"

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def format(self) -> str:
        """Format error message with context if available."""
        text = f"{self.kind}: {self.message}"
        if self.context:
            return f"{text}\n{self.context.format()}"
        return text

    def attach_source(self, source: str) -> CalcError:
        """Attach the input line so the error can point into it."""
        pos = getattr(self, "pos", None)
        if pos is not None and self.context is None:
            self.context = ErrorContext(source=source, pos=pos)
        return self


class ConfigError(CalcError):
    """Raised when calcline.toml holds invalid settings."""

    kind = "config error"


# ---------------------------------------------------------------------------
# Lexical errors
# ---------------------------------------------------------------------------


class LexError(CalcError):
    """
    Raised when input text cannot be split into tokens.

    Examples:
    - Characters outside the calculator alphabet
    - Numbers with more than one decimal point
    """

    kind = "lex error"

    def __init__(self, message: str, pos: int):
        self.pos = pos
        super().__init__(message)


class UnexpectedCharacter(LexError):
    def __init__(self, char: str, pos: int):
        self.char = char
        super().__init__(f"unexpected character {char!r} at position {pos}", pos)


class InvalidNumber(LexError):
    def __init__(self, text: str, pos: int):
        self.text = text
        super().__init__(f"invalid number {text!r} at position {pos}", pos)


# ---------------------------------------------------------------------------
# Syntactic errors
# ---------------------------------------------------------------------------


class ParseError(CalcError):
    """
    Raised when a token sequence does not match the grammar.

    Examples:
    - An operator where a number is expected
    - Input ending in the middle of an expression
    """

    kind = "parse error"


class UnexpectedToken(ParseError):
    def __init__(self, found: str, pos: int, expected: str):
        self.found = found
        self.pos = pos
        self.expected = expected
        super().__init__(f"expected {expected}, found {found!r} at position {pos}")


class UnexpectedEndOfInput(ParseError):
    def __init__(self, expected: str, pos: int | None = None):
        self.expected = expected
        self.pos = pos
        super().__init__(f"expected {expected}, found end of input")


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------


class EvalError(CalcError):
    """Raised when a well-formed expression cannot be reduced to a number."""

    kind = "eval error"


class DivisionByZero(EvalError):
    def __init__(self) -> None:
        super().__init__("division by zero")
