"""
Familiarity - coarse 1-5 display tier

Derived from (stability, state) for notebook filters and reports.
Never an input to the memory model.
"""

from __future__ import annotations
import math
from typing import Optional

from hanzi_srs.fsrs.constants import (
    CardPhase,
    FAMILIARITY_MAX,
    FAMILIARITY_MIN,
    FAMILIARITY_THRESHOLDS,
    LEARNING_FAMILIARITY_CAP,
)
from hanzi_srs.fsrs.memory_state import CardState


def calculate_familiarity(stability: Optional[float], state: CardPhase) -> int:
    """
    Map memory state to a familiarity tier.

    Learning/Relearning cards are capped at 3:
        min(3, ceil(S / 2) + 1)
    Other cards use stability thresholds:
        S < 1 -> 1, S < 3 -> 2, S < 10 -> 3, S < 30 -> 4, else 5

    The two branches do not join smoothly around S = 4-5; the jump
    when a card graduates from relearning is intended.

    Args:
        stability: Current stability, or None for a never-graded card
        state: Card phase

    Returns:
        Familiarity 1-5
    """
    if stability is None:
        return FAMILIARITY_MIN

    if state in (CardPhase.LEARNING, CardPhase.RELEARNING):
        return min(LEARNING_FAMILIARITY_CAP, math.ceil(stability / 2) + 1)

    for tier, upper in enumerate(FAMILIARITY_THRESHOLDS, start=FAMILIARITY_MIN):
        if stability < upper:
            return tier
    return FAMILIARITY_MAX


def card_familiarity(card: CardState) -> int:
    return calculate_familiarity(card.stability, card.state)
