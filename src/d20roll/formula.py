from __future__ import annotations

from .models import BinaryOp, DiceRoll, Expression, Grouping, Number


def to_infix(node: Expression) -> str:
    """Render the canonical infix formula for an expression, e.g. ``(2d20 + 4) / 2``.

    Single dice drop their count (``d20``); parentheses are kept exactly where
    the input had them.
    """

    match node:
        case Number(value=value):
            return str(value)
        case DiceRoll(count=count, sides=sides):
            return f"d{sides}" if count == 1 else f"{count}d{sides}"
        case Grouping(inner=inner):
            return f"({to_infix(inner)})"
        case BinaryOp():
            spine: list[BinaryOp] = []
            while isinstance(node, BinaryOp):
                spine.append(node)
                node = node.left
            parts = [to_infix(node)]
            for op_node in reversed(spine):
                parts.append(f"{op_node.op} {to_infix(op_node.right)}")
            return " ".join(parts)

    raise TypeError(f"not an expression node: {type(node).__name__}")
