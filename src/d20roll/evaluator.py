from __future__ import annotations

import structlog

from .dice import RandomSource, roll
from .errors import EvaluationError, EvaluationErrorKind
from .models import (
    INT_MAX,
    INT_MIN,
    BinaryOp,
    DiceRoll,
    EvaluationResult,
    Expression,
    Grouping,
    Number,
    RollRecord,
)


log = structlog.get_logger()


def _checked(value: int, what: str) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise EvaluationError(
            EvaluationErrorKind.OVERFLOW,
            f"{what} {value} does not fit in a 32-bit integer.",
        )
    return value


def ceil_div(left: int, right: int) -> int:
    """Divide, rounding any fractional quotient up toward positive infinity.

    Floor division is exact for negative operands too, so ``-7 / 2`` gives -3.
    """
    return -(-left // right)


def _eval(node: Expression, rng: RandomSource, trace: list[RollRecord], max_dice: int | None) -> int:
    match node:
        case Number(value=value):
            return _checked(value, "Number")

        case DiceRoll(count=count, sides=sides):
            _checked(count, "Dice count")
            _checked(sides, "Dice sides")
            rolls = roll(count, sides, rng, max_dice=max_dice)
            record = RollRecord(count=count, sides=sides, rolls=tuple(rolls))
            trace.append(record)
            return _checked(record.total, f"Sum of {count}d{sides}")

        case Grouping(inner=inner):
            return _eval(inner, rng, trace, max_dice)

        case BinaryOp():
            # Walk the left spine in a loop; "1 + 1 + ... + 1" nests to the left.
            spine: list[BinaryOp] = []
            while isinstance(node, BinaryOp):
                spine.append(node)
                node = node.left
            value = _eval(node, rng, trace, max_dice)
            for op_node in reversed(spine):
                rhs = _eval(op_node.right, rng, trace, max_dice)
                value = _apply(op_node.op, value, rhs)
            return value

    raise TypeError(f"not an expression node: {type(node).__name__}")


def _apply(op: str, lhs: int, rhs: int) -> int:
    if op == "+":
        return _checked(lhs + rhs, "Result")
    if op == "-":
        return _checked(lhs - rhs, "Result")
    if op == "*":
        return _checked(lhs * rhs, "Result")
    if op == "/":
        if rhs == 0:
            raise EvaluationError(EvaluationErrorKind.DIVISION_BY_ZERO, f"Cannot divide {lhs} by zero.")
        return _checked(ceil_div(lhs, rhs), "Result")
    raise TypeError(f"unknown operator {op!r}")


def evaluate(ast: Expression, rng: RandomSource, max_dice: int | None = None) -> EvaluationResult:
    """Evaluate ``ast`` left to right, rolling dice from ``rng``.

    The trace lists every roll in the order it was made. Raises EvaluationError;
    a failed evaluation returns no trace.
    """

    trace: list[RollRecord] = []
    value = _eval(ast, rng, trace, max_dice)
    log.debug("evaluate.done", value=value, rolls=len(trace))
    return EvaluationResult(value=value, trace=tuple(trace))
