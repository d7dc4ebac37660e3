from __future__ import annotations

from enum import Enum


class DiceError(ValueError):
    """User-facing errors raised while reading or rolling an expression (no partial result)."""


class ParseErrorKind(str, Enum):
    UNEXPECTED_TOKEN = "UNEXPECTED_TOKEN"
    UNEXPECTED_END = "UNEXPECTED_END"
    UNBALANCED_PARENS = "UNBALANCED_PARENS"
    INVALID_DICE_EXPRESSION = "INVALID_DICE_EXPRESSION"


class EvaluationErrorKind(str, Enum):
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    OVERFLOW = "OVERFLOW"
    INVALID_DICE_SPEC = "INVALID_DICE_SPEC"


class LexError(DiceError):
    code = "UNRECOGNIZED_CHARACTER"

    def __init__(self, position: int, character: str) -> None:
        self.position = position
        self.character = character
        super().__init__(f"[{self.code}] Unexpected character {character!r} at position {position}.")


class ParseError(DiceError):
    def __init__(self, kind: ParseErrorKind, position: int, detail: str = "") -> None:
        self.kind = kind
        self.position = position
        message = f"[{kind.value}] at position {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.kind.value


class EvaluationError(DiceError):
    def __init__(self, kind: EvaluationErrorKind, detail: str = "") -> None:
        self.kind = kind
        super().__init__(f"[{kind.value}] {detail}".rstrip())

    @property
    def code(self) -> str:
        return self.kind.value
