from __future__ import annotations

from collections.abc import Iterator

from .errors import EvaluationError, EvaluationErrorKind, LexError
from .models import INT_MAX, Token, TokenKind


_MAX_DIGITS = len(str(INT_MAX))

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": "+",
    "-": "-",
    "*": "*",
    "/": "/",
    "(": "(",
    ")": ")",
    "d": "d",
    "D": "d",
}


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text`` lazily, ending with a single ``end`` token.

    Whitespace is skipped. Raises LexError on the first character that is not
    part of the grammar; since tokens are produced on demand, the error
    surfaces when the consumer reaches that character. A number with more
    digits than any 32-bit value raises EvaluationError(OVERFLOW) here.
    """

    pos = 0
    length = len(text)

    while pos < length:
        ch = text[pos]

        if ch.isspace():
            pos += 1
            continue

        # str.isdigit() accepts superscripts and other non-ASCII digits.
        if "0" <= ch <= "9":
            start = pos
            while pos < length and "0" <= text[pos] <= "9":
                pos += 1
            digits = text[start:pos].lstrip("0") or "0"
            # Longer runs cannot fit, and int() refuses very long strings.
            if len(digits) > _MAX_DIGITS:
                raise EvaluationError(
                    EvaluationErrorKind.OVERFLOW,
                    f"Number at position {start} has {len(digits)} digits and does not fit in a 32-bit integer.",
                )
            yield Token(kind="int", position=start, value=int(digits))
            continue

        kind = _SINGLE_CHAR_TOKENS.get(ch)
        if kind is None:
            raise LexError(position=pos, character=ch)

        yield Token(kind=kind, position=pos)
        pos += 1

    yield Token(kind="end", position=length)
