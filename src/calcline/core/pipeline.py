"""
Per-line driver for the calculator.

Runs tokenize → parse → evaluate over one input line and collects one
outcome per top-level term. A failing term never hides the terms that
were completed before it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from calcline.core.errors import CalcError, EvalError, LexError, ParseError
from calcline.core.expression_lang.evaluator import evaluate
from calcline.core.expression_lang.parser import iter_terms, parse_expr
from calcline.core.expression_lang.tokenizer import Token, tokenize
from calcline.core.ir.expressions import Expr

logger = logging.getLogger(__name__)


@dataclass
class TermResult:
    """Outcome of a single top-level term: a value or an error."""

    expr: Expr | None = None
    value: float | None = None
    error: CalcError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LineResult:
    """Everything produced while processing one input line."""

    source: str
    tokens: list[Token] = field(default_factory=list)
    terms: list[TermResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(term.ok for term in self.terms)

    @property
    def values(self) -> list[float]:
        return [term.value for term in self.terms if term.value is not None]

    @property
    def errors(self) -> list[CalcError]:
        return [term.error for term in self.terms if term.error is not None]


def run_line(source: str) -> LineResult:
    """Tokenize, parse, and evaluate every term in one input line.

    Lexical errors fail the whole line. Parse errors end the line but keep
    the terms completed before them. Evaluation errors are confined to
    their own term.
    """
    result = LineResult(source=source)

    try:
        result.tokens = tokenize(source)
    except LexError as e:
        logger.debug("Tokenization failed: %s", e)
        result.terms.append(TermResult(error=e.attach_source(source)))
        return result

    logger.debug("Tokens: %s", " ".join(str(t) for t in result.tokens))

    terms = iter_terms(result.tokens)
    while True:
        try:
            expr = next(terms)
        except StopIteration:
            break
        except ParseError as e:
            logger.debug("Parsing failed: %s", e)
            result.terms.append(TermResult(error=e.attach_source(source)))
            break

        logger.debug("Parsed term: %s", expr)
        try:
            value = evaluate(expr)
        except EvalError as e:
            logger.debug("Evaluation of %s failed: %s", expr, e)
            result.terms.append(TermResult(expr=expr, error=e))
            continue
        result.terms.append(TermResult(expr=expr, value=value))

    return result


def calculate(source: str) -> float:
    """Evaluate a string holding exactly one expression.

    Raises:
        CalcError: Whatever the first failing stage raised.
    """
    try:
        expr = parse_expr(source)
    except (LexError, ParseError) as e:
        e.attach_source(source)
        raise
    return evaluate(expr)
