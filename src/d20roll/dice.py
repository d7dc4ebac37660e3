from __future__ import annotations

import random
import secrets
from typing import Protocol

import structlog

from .config import get_settings
from .errors import EvaluationError, EvaluationErrorKind


log = structlog.get_logger()


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from an inclusive range."""

    def randint(self, a: int, b: int) -> int: ...


def system_rng() -> RandomSource:
    return secrets.SystemRandom()


def seeded_rng(seed: int | str | None) -> RandomSource:
    """A deterministic source: two sources with the same seed draw the same sequence."""
    return random.Random(seed)


def roll(count: int, sides: int, rng: RandomSource, max_dice: int | None = None) -> list[int]:
    """Roll ``count`` dice of ``sides`` faces and return each face in draw order.

    Raises EvaluationError(INVALID_DICE_SPEC) for a count or sides below 1, or a
    count above ``max_dice`` (the configured limit when not given).
    """

    if count < 1:
        raise EvaluationError(
            EvaluationErrorKind.INVALID_DICE_SPEC,
            f"Dice count must be a positive integer, got {count}. Example: '2d6'.",
        )
    if sides < 1:
        raise EvaluationError(
            EvaluationErrorKind.INVALID_DICE_SPEC,
            f"Dice must have at least one side, got {sides}. Example: 'd20'.",
        )

    limit = max_dice if max_dice is not None else get_settings().max_dice
    if count > limit:
        raise EvaluationError(
            EvaluationErrorKind.INVALID_DICE_SPEC,
            f"At most {limit} dice can be rolled at once, got {count}.",
        )

    rolls = [rng.randint(1, sides) for _ in range(count)]
    log.debug("dice.roll", count=count, sides=sides, rolls=rolls)
    return rolls
