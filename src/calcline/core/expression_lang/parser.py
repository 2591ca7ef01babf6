"""
Recursive descent parser for the calcline expression language.

Grammar (precedence low to high):
    program  → term*
    term     → factor (("+" | "-") factor)*
    factor   → unary (("*" | "/") unary)*
    unary    → "-" literal | literal
    literal  → NUMBER

Unary minus applies to a single literal only, so "- - 3" is rejected.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from calcline.core.errors import UnexpectedEndOfInput, UnexpectedToken
from calcline.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from calcline.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal, UnaryMinus

_TERM_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_FACTOR_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}

# Tokens that may begin a new top-level term
_TERM_START = frozenset({TokenKind.NUMBER, TokenKind.MINUS})


class _Parser:
    """Recursive descent parser over a shared token cursor."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def match(self, *kinds: TokenKind) -> Token | None:
        tok = self.current
        if tok is not None and tok.kind in kinds:
            return self.advance()
        return None

    def _end_pos(self) -> int:
        return self.tokens[-1].end if self.tokens else 0

    # -- Grammar rules --

    def parse_program(self) -> Iterator[Expr]:
        """term*"""
        while not self.at_end:
            tok = self.tokens[self.pos]
            if tok.kind not in _TERM_START:
                raise UnexpectedToken(tok.text, tok.pos, "start of expression")
            yield self.parse_term()

    def parse_term(self) -> Expr:
        """factor (('+' | '-') factor)*"""
        left = self.parse_factor()
        while (tok := self.match(*_TERM_OPS)) is not None:
            right = self.parse_factor()
            left = BinaryExpr(op=_TERM_OPS[tok.kind], left=left, right=right)
        return left

    def parse_factor(self) -> Expr:
        """unary (('*' | '/') unary)*"""
        left = self.parse_unary()
        while (tok := self.match(*_FACTOR_OPS)) is not None:
            right = self.parse_unary()
            left = BinaryExpr(op=_FACTOR_OPS[tok.kind], left=left, right=right)
        return left

    def parse_unary(self) -> Expr:
        """'-' literal | literal"""
        if self.match(TokenKind.MINUS):
            return UnaryMinus(operand=self.parse_literal())
        return self.parse_literal()

    def parse_literal(self) -> Literal:
        """NUMBER"""
        tok = self.current
        if tok is None:
            raise UnexpectedEndOfInput("number", self._end_pos())
        if tok.kind != TokenKind.NUMBER:
            raise UnexpectedToken(tok.text, tok.pos, "number")
        self.advance()
        assert tok.value is not None
        return Literal(value=tok.value)


def iter_terms(tokens: Sequence[Token]) -> Iterator[Expr]:
    """Yield one expression tree per top-level term.

    Each term is yielded as soon as it is complete, so a caller can act
    on earlier terms before a later one fails to parse.

    Raises:
        ParseError: On the first token that does not fit the grammar.
    """
    return _Parser(tokens).parse_program()


def parse(tokens: Sequence[Token]) -> list[Expr]:
    """Parse a token sequence into a list of expression trees.

    Args:
        tokens: Output of ``tokenize``.

    Returns:
        One tree per top-level term; empty for empty input.

    Raises:
        UnexpectedToken: If a token appears where the grammar forbids it.
        UnexpectedEndOfInput: If input ends where an operand is expected.
    """
    return list(iter_terms(tokens))


def parse_expr(source: str) -> Expr:
    """Parse a string holding exactly one expression.

    Args:
        source: Expression string (e.g., "2 + 3 * 4")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the input is not exactly one well-formed term.
        LexError: If tokenization fails.
    """
    tokens = tokenize(source)
    parser = _Parser(tokens)
    if parser.at_end:
        raise UnexpectedEndOfInput("expression", 0)

    expr = parser.parse_term()

    # Ensure all tokens consumed
    tok = parser.current
    if tok is not None:
        raise UnexpectedToken(tok.text, tok.pos, "end of input")

    return expr
