from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import ParseError, ParseErrorKind
from .lexer import tokenize
from .models import BinaryOp, DiceRoll, Expression, Grouping, Number, Token


# Each open parenthesis costs several stack frames while parsing and evaluating.
MAX_NESTING = 100


class _Parser:
    """Recursive-descent parser with a single token of lookahead.

    Grammar, loosest binding first::

        expr  := term (('+' | '-') term)*
        term  := dice (('*' | '/') dice)*
        dice  := [integer] 'd' integer | atom
        atom  := integer | '(' expr ')'
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._next_position = 0
        self._depth = 0
        self._current: Token = self._pull()

    def _pull(self) -> Token:
        tok = next(self._tokens, None)
        if tok is None:
            # Token streams built by hand may omit the trailing end marker.
            return Token(kind="end", position=self._next_position)
        self._next_position = tok.position + 1
        return tok

    def _advance(self) -> Token:
        tok = self._current
        if tok.kind != "end":
            self._current = self._pull()
        return tok

    def parse(self) -> Expression:
        node = self._expr()
        tok = self._current
        if tok.kind == ")":
            raise ParseError(ParseErrorKind.UNBALANCED_PARENS, tok.position, "unmatched ')'")
        if tok.kind != "end":
            raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, tok.position, f"unexpected {_describe(tok)}")
        return node

    def _expr(self) -> Expression:
        node = self._term()
        while self._current.kind in ("+", "-"):
            op = self._advance().kind
            node = BinaryOp(op=op, left=node, right=self._term())
        return node

    def _term(self) -> Expression:
        node = self._dice()
        while self._current.kind in ("*", "/"):
            op = self._advance().kind
            node = BinaryOp(op=op, left=node, right=self._dice())
        return node

    def _dice(self) -> Expression:
        tok = self._current

        if tok.kind == "d":
            self._advance()
            return DiceRoll(count=1, sides=self._dice_sides(tok))

        if tok.kind == "int":
            self._advance()
            if self._current.kind == "d":
                dice_op = self._advance()
                return DiceRoll(count=tok.value, sides=self._dice_sides(dice_op))
            return Number(value=tok.value)

        return self._atom()

    def _dice_sides(self, dice_op: Token) -> int:
        tok = self._current
        if tok.kind != "int":
            raise ParseError(
                ParseErrorKind.INVALID_DICE_EXPRESSION,
                dice_op.position,
                "'d' must be followed by a number of sides",
            )
        self._advance()
        return tok.value

    def _atom(self) -> Expression:
        tok = self._current

        if tok.kind == "int":
            self._advance()
            return Number(value=tok.value)

        if tok.kind == "(":
            if self._depth >= MAX_NESTING:
                raise ParseError(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    tok.position,
                    f"parentheses nested deeper than {MAX_NESTING} levels",
                )
            self._advance()
            self._depth += 1
            inner = self._expr()
            if self._current.kind != ")":
                if self._current.kind == "end":
                    raise ParseError(ParseErrorKind.UNBALANCED_PARENS, tok.position, "unclosed '('")
                raise ParseError(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    self._current.position,
                    f"expected ')' but found {_describe(self._current)}",
                )
            self._advance()
            self._depth -= 1
            return Grouping(inner=inner)

        if tok.kind == ")":
            raise ParseError(ParseErrorKind.UNBALANCED_PARENS, tok.position, "unmatched ')'")
        if tok.kind == "end":
            raise ParseError(ParseErrorKind.UNEXPECTED_END, tok.position, "expected a number, a roll or '('")
        raise ParseError(ParseErrorKind.UNEXPECTED_TOKEN, tok.position, f"unexpected {_describe(tok)}")


def _describe(tok: Token) -> str:
    if tok.kind == "int":
        return f"number {tok.value}"
    if tok.kind == "end":
        return "end of input"
    return f"'{tok.kind}'"


def parse(tokens: Iterable[Token]) -> Expression:
    """Build the expression tree for a token stream. Raises ParseError (or LexError from a lazy lexer)."""

    return _Parser(tokens).parse()


def parse_text(text: str) -> Expression:
    return parse(tokenize(text))
