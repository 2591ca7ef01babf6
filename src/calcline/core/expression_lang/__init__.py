"""
calcline expression language.

Tokenizer, parser, and evaluator for single-line arithmetic.

Usage:
    from calcline.core.expression_lang import evaluate, parse, tokenize

    exprs = parse(tokenize("2 + 3 * 4"))
    result = evaluate(exprs[0])
    # result == 14.0
"""

from calcline.core.expression_lang.evaluator import evaluate, evaluate_program
from calcline.core.expression_lang.parser import iter_terms, parse, parse_expr
from calcline.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "Token",
    "TokenKind",
    "evaluate",
    "evaluate_program",
    "iter_terms",
    "parse",
    "parse_expr",
    "tokenize",
]
