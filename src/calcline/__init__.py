"""
calcline - an interactive line calculator.

Tokenizes a line of arithmetic, parses it with standard precedence and
left-associativity, and evaluates each expression to a float.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    CalcError,
    DivisionByZero,
    EvalError,
    InvalidNumber,
    LexError,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .core.expression_lang import (
    evaluate,
    evaluate_program,
    iter_terms,
    parse,
    parse_expr,
    tokenize,
)
from .core.pipeline import calculate, run_line

__version__ = get_version()

__all__ = [
    "__version__",
    "CalcError",
    "LexError",
    "UnexpectedCharacter",
    "InvalidNumber",
    "ParseError",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "EvalError",
    "DivisionByZero",
    "tokenize",
    "parse",
    "iter_terms",
    "parse_expr",
    "evaluate",
    "evaluate_program",
    "run_line",
    "calculate",
]
