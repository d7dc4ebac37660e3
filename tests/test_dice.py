import pytest

from d20roll.dice import roll, seeded_rng, system_rng
from d20roll.errors import EvaluationError, EvaluationErrorKind


@pytest.mark.parametrize(("count", "sides"), [(1, 20), (4, 6), (10, 100), (3, 1)])
def test_roll_returns_count_faces_in_range(count, sides):
    rolls = roll(count, sides, system_rng())
    assert len(rolls) == count
    assert all(1 <= face <= sides for face in rolls)


def test_single_sided_die_always_rolls_one():
    assert roll(5, 1, seeded_rng(3)) == [1, 1, 1, 1, 1]


def test_roll_keeps_draw_order(scripted_rng):
    rng = scripted_rng([6, 1, 4])
    assert roll(3, 6, rng) == [6, 1, 4]
    assert rng.calls == [(1, 6), (1, 6), (1, 6)]


def test_seeded_sources_repeat():
    assert roll(20, 20, seeded_rng(42)) == roll(20, 20, seeded_rng(42))


@pytest.mark.parametrize(("count", "sides"), [(0, 6), (-1, 6), (1, 0), (2, -4)])
def test_roll_rejects_invalid_dice(count, sides):
    with pytest.raises(EvaluationError) as exc:
        roll(count, sides, seeded_rng(0))
    assert exc.value.kind is EvaluationErrorKind.INVALID_DICE_SPEC


def test_roll_enforces_dice_limit(scripted_rng):
    rng = scripted_rng([])
    with pytest.raises(EvaluationError) as exc:
        roll(11, 6, rng, max_dice=10)
    assert exc.value.kind is EvaluationErrorKind.INVALID_DICE_SPEC
    assert rng.calls == []


def test_roll_uses_configured_dice_limit(monkeypatch):
    monkeypatch.setenv("D20ROLL_MAX_DICE", "5")
    assert len(roll(5, 6, seeded_rng(1))) == 5
    with pytest.raises(EvaluationError):
        roll(6, 6, seeded_rng(1))
