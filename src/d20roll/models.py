from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from .errors import DiceError


TokenKind: TypeAlias = Literal["int", "+", "-", "*", "/", "d", "(", ")", "end"]
Operator: TypeAlias = Literal["+", "-", "*", "/"]

# Results are bounded like a signed 32-bit outcome.
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    position: int
    value: int | None = None


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class DiceRoll:
    count: int
    sides: int


@dataclass(frozen=True)
class BinaryOp:
    op: Operator
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Grouping:
    inner: Expression


Expression: TypeAlias = Number | BinaryOp | DiceRoll | Grouping


@dataclass(frozen=True)
class RollRecord:
    count: int
    sides: int
    rolls: tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.rolls)


@dataclass(frozen=True)
class EvaluationResult:
    value: int
    trace: tuple[RollRecord, ...] = ()


@dataclass(frozen=True)
class RollOutcome:
    """A finished roll, tagged with the formula that produced it."""

    descriptor: str
    outcome: int
    trace: tuple[RollRecord, ...] = ()


@dataclass(frozen=True)
class RollFailure:
    input: str
    error: DiceError
