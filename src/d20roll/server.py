from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

import structlog
from mcp.server.fastmcp import FastMCP

from .config import get_settings
from .dice import seeded_rng, system_rng
from .errors import DiceError
from .logging import setup_logging
from .roller import roll_expression


mcp = FastMCP("d20roll")
log = structlog.get_logger()


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


@mcp.tool()
def roll_dice(text: str) -> dict[str, Any]:
    """Roll a dice arithmetic expression such as '(2d20 + 4) / 2 - (1d4 * 2)'.

    Input: text (string). Supports NdM dice, integers, + - * / and parentheses.
    Division rounds fractions up.
    Output: structured JSON with the total and every individual die.

    Raises a hard error (exception) on invalid input.
    """

    settings = get_settings()
    if settings.seed is not None:
        rng, source = seeded_rng(settings.seed), "random.Random"
    else:
        rng, source = system_rng(), "secrets.SystemRandom"

    try:
        outcome = roll_expression(text, rng, max_dice=settings.max_dice)
    except DiceError as e:
        log.info("server.roll_dice.rejected", input=text, error=str(e))
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None

    return {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": text,
        "normalized_expression": outcome.descriptor,
        "rng": {"source": source},
        "rolls": [
            {
                "count": record.count,
                "sides": record.sides,
                "rolls": list(record.rolls),
                "subtotal": record.total,
            }
            for record in outcome.trace
        ],
        "total": outcome.outcome,
    }


def run() -> None:
    setup_logging(get_settings())
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
