import pytest

from d20roll.models import BinaryOp, DiceRoll, Grouping, Number, Token
from d20roll.parser import MAX_NESTING, parse, parse_text


@pytest.mark.parametrize(
    ("text", "ast"),
    [
        ("42", Number(42)),
        ("d20", DiceRoll(count=1, sides=20)),
        ("3 D 8", DiceRoll(count=3, sides=8)),
        ("2d6 * 3", BinaryOp("*", DiceRoll(count=2, sides=6), Number(3))),
        ("3 * 2d6", BinaryOp("*", Number(3), DiceRoll(count=2, sides=6))),
        ("1 - 2 - 3", BinaryOp("-", BinaryOp("-", Number(1), Number(2)), Number(3))),
        ("8 / 4 / 2", BinaryOp("/", BinaryOp("/", Number(8), Number(4)), Number(2))),
        ("2 + 3 * 4", BinaryOp("+", Number(2), BinaryOp("*", Number(3), Number(4)))),
        ("(2 + 3) * 4", BinaryOp("*", Grouping(BinaryOp("+", Number(2), Number(3))), Number(4))),
        ("((7))", Grouping(Grouping(Number(7)))),
        (
            "(2d20 + 4) / 2 - (1d4 * 2)",
            BinaryOp(
                "-",
                BinaryOp(
                    "/",
                    Grouping(BinaryOp("+", DiceRoll(count=2, sides=20), Number(4))),
                    Number(2),
                ),
                Grouping(BinaryOp("*", DiceRoll(count=1, sides=4), Number(2))),
            ),
        ),
    ],
)
def test_parse_acceptance(text, ast):
    assert parse_text(text) == ast


def test_parse_accepts_stream_without_end_token():
    tokens = [
        Token(kind="int", position=0, value=1),
        Token(kind="+", position=2),
        Token(kind="d", position=4),
        Token(kind="int", position=5, value=6),
    ]
    assert parse(tokens) == BinaryOp("+", Number(1), DiceRoll(count=1, sides=6))


def test_parse_accepts_nesting_up_to_limit():
    depth = MAX_NESTING
    node = parse_text("(" * depth + "d4 + 1" + ")" * depth)
    for _ in range(depth):
        assert isinstance(node, Grouping)
        node = node.inner
    assert node == BinaryOp("+", DiceRoll(count=1, sides=4), Number(1))
