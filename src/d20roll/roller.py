from __future__ import annotations

import structlog

from .dice import RandomSource, system_rng
from .errors import DiceError
from .evaluator import evaluate
from .formula import to_infix
from .models import RollFailure, RollOutcome
from .parser import parse_text


log = structlog.get_logger()


def roll_expression(text: str, rng: RandomSource | None = None, max_dice: int | None = None) -> RollOutcome:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    ast = parse_text(text)
    result = evaluate(ast, rng if rng is not None else system_rng(), max_dice=max_dice)
    outcome = RollOutcome(descriptor=to_infix(ast), outcome=result.value, trace=result.trace)
    log.info("roller.rolled", descriptor=outcome.descriptor, outcome=outcome.outcome)
    return outcome


def try_roll(text: str, rng: RandomSource | None = None, max_dice: int | None = None) -> RollOutcome | RollFailure:
    """Like roll_expression, but hands back a RollFailure instead of raising."""

    try:
        return roll_expression(text, rng, max_dice=max_dice)
    except DiceError as e:
        log.info("roller.failed", input=text, error=str(e))
        return RollFailure(input=text, error=e)
