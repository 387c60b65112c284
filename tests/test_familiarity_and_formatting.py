import pytest

from hanzi_srs.fsrs.constants import CardPhase, Grade
from hanzi_srs.fsrs.familiarity import calculate_familiarity, card_familiarity
from hanzi_srs.fsrs.formatting import format_interval
from hanzi_srs.fsrs.memory_state import new_card


@pytest.mark.parametrize("stability, expected", [
    (0.5, 1),
    (0.99, 1),
    (1.0, 2),
    (2.9, 2),
    (3.0, 3),
    (9.99, 3),
    (10.0, 4),
    (29.9, 4),
    (30.0, 5),
    (500.0, 5),
])
def test_review_familiarity_thresholds(stability, expected):
    assert calculate_familiarity(stability, CardPhase.REVIEW) == expected


@pytest.mark.parametrize("stability, expected", [
    (0.1, 2),
    (2.0, 2),
    (2.5, 3),
    (50.0, 3),
])
def test_learning_familiarity_is_capped(stability, expected):
    assert calculate_familiarity(stability, CardPhase.LEARNING) == expected
    assert calculate_familiarity(stability, CardPhase.RELEARNING) == expected


def test_learning_review_boundary_discontinuity():
    # Relearning stays capped at 3 where Review already shows 4
    assert calculate_familiarity(10.0, CardPhase.RELEARNING) == 3
    assert calculate_familiarity(10.0, CardPhase.REVIEW) == 4


def test_unscheduled_new_card_is_tier_one():
    assert card_familiarity(new_card("u", "学")) == 1


def test_familiarity_after_first_grade(scheduler, now):
    good, _ = scheduler.schedule(new_card("u", "学"), Grade.GOOD, now)
    again, _ = scheduler.schedule(new_card("u", "学"), Grade.AGAIN, now)
    assert card_familiarity(good) == 3
    assert card_familiarity(again) == 2


@pytest.mark.parametrize("days, expected", [
    (0, "0m"),
    (0.02, "29m"),
    (0.04, "58m"),
    (0.5, "12h"),
    (0.99, "24h"),
    (1, "1d"),
    (3, "3d"),
    (29.4, "29d"),
    (30, "1mo"),
    (45, "2mo"),
    (90, "3mo"),
    (364, "12mo"),
    (365, "1.0y"),
    (400, "1.1y"),
    (36500, "100.0y"),
])
def test_format_interval(days, expected):
    assert format_interval(days) == expected
