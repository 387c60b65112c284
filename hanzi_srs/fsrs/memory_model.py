"""
Memory Model - FSRS-5 stability and difficulty updates

Pure functions over numbers. Each function takes the weight vector `w`
explicitly and clamps its own output:
- stability is floored at S_MIN
- difficulty is clipped to [D_MIN, D_MAX]

Key principles:
- Reviewing after heavy decay (low R) yields the largest stability gains
- Confirming something already well remembered (R near 1) teaches little
- Failures collapse stability toward a small power of its previous value
"""

from __future__ import annotations
import math
from typing import Sequence

from hanzi_srs.fsrs.constants import Grade, S_MIN, D_MIN, D_MAX


def clamp_difficulty(difficulty: float) -> float:
    return max(D_MIN, min(D_MAX, difficulty))


def floor_stability(stability: float) -> float:
    return max(S_MIN, stability)


def initial_stability(grade: Grade, w: Sequence[float]) -> float:
    """
    Stability after the very first grade.

    Formula: S0 = w[g-1]
    """
    return floor_stability(w[grade - 1])


def initial_difficulty(grade: Grade, w: Sequence[float]) -> float:
    """
    Difficulty after the very first grade.

    Formula: D0 = clip(w[4] - exp(w[5] * (g - 3)) + 1, 1, 10)

    Good lands exactly on w[4]; Easy below it, Hard and Again above.
    """
    return clamp_difficulty(w[4] - math.exp(w[5] * (grade - 3)) + 1)


def update_difficulty_on_success(
    difficulty: float,
    grade: Grade,
    w: Sequence[float]
) -> float:
    """
    Difficulty after a Hard/Good/Easy review.

    Formula: D' = clip(D + w[7] * (3 - g), 1, 10)
    """
    return clamp_difficulty(difficulty + w[7] * (3 - grade))


def _grade_factor(grade: Grade, w: Sequence[float]) -> float:
    if grade == Grade.HARD:
        return w[10]
    if grade == Grade.EASY:
        return w[11]
    return 1.0


def update_stability_on_success(
    stability: float,
    difficulty: float,
    retrievability: float,
    grade: Grade,
    w: Sequence[float]
) -> float:
    """
    Stability after a successful retrieval (Hard/Good/Easy).

    Formula:
        S' = S * (1 + exp(w[6]) * (11 - D') * S^(-w[5])
                    * (exp((1 - R) * w[14]) - 1) * factor(g))

    Where:
        - D' is the difficulty already updated for this review
        - factor(g) = w[10] for Hard, 1 for Good, w[11] for Easy
        - (exp((1 - R) * w[14]) - 1) is 0 at R = 1, so an immediate
          re-review does not grow stability

    Args:
        stability: Current stability (S)
        difficulty: Updated difficulty (D')
        retrievability: Retrievability at review time (R)
        grade: HARD, GOOD or EASY
        w: Weight vector

    Returns:
        New stability value (>= S_MIN)
    """
    if grade == Grade.AGAIN:
        raise ValueError("Use update_on_failure for AGAIN grades")

    growth = (
        math.exp(w[6])
        * (11.0 - difficulty)
        * math.pow(stability, -w[5])
        * (math.exp((1.0 - retrievability) * w[14]) - 1.0)
        * _grade_factor(grade, w)
    )
    return floor_stability(stability * (1.0 + growth))


def update_on_failure(
    stability: float,
    difficulty: float,
    w: Sequence[float]
) -> tuple[float, float]:
    """
    Stability and difficulty after an Again on a reviewed card.

    Formulas:
        S' = max(0.1, w[12] * S^w[13])
        D' = clip(D + 2 * w[7], 1, 10)

    Returns:
        (new_stability, new_difficulty)
    """
    new_stability = floor_stability(w[12] * math.pow(stability, w[13]))
    new_difficulty = clamp_difficulty(difficulty + 2.0 * w[7])
    return new_stability, new_difficulty


def round_half_up(value: float) -> int:
    """Round .5 upwards (Python's round() uses banker's rounding)."""
    return int(math.floor(value + 0.5))


def next_interval(
    stability: float,
    target_retention: float,
    max_interval_days: int
) -> float:
    """
    Interval in days until retrievability falls to the target retention.

    Formula: I = round(9 * S * (1/r - 1)), clipped to [0, max_interval_days]

    At r = 0.9 the interval equals the stability.
    """
    interval = round_half_up(9.0 * stability * (1.0 / target_retention - 1.0))
    return float(min(max_interval_days, max(0, interval)))
