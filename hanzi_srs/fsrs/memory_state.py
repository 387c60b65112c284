"""
Memory State - FSRS Card State and Retrievability

Defines the persisted memory record for one (learner, character) pair and
the time-derived quantities computed from it.

Key concepts:
- Stability (S): Days until retrievability decays to ~90%
- Difficulty (D): How hard the character is to retain (1-10 scale)
- Retrievability (R): Probability of successful recall at time t
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from hanzi_srs.fsrs.constants import CardPhase


SECONDS_PER_DAY = 86400.0


@dataclass(frozen=True)
class CardState:
    """
    Memory state for a single card.

    A card is defined as: (user_id, character)

    Stability and difficulty stay None until the first grade is applied.
    Instances are immutable; the scheduler returns a new one per review.
    """
    user_id: str
    character: str

    state: CardPhase = CardPhase.NEW

    # Memory model parameters
    stability: Optional[float] = None  # S, in days
    difficulty: Optional[float] = None  # D, range 1-10

    # Review tracking
    reps: int = 0
    lapses: int = 0
    last_review: Optional[datetime] = None
    next_review: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        return self.state == CardPhase.NEW


def new_card(user_id: str, character: str) -> CardState:
    """Create the implicit New state for a character the learner just met."""
    return CardState(user_id=user_id, character=character)


def get_elapsed_days(last_review: Optional[datetime], now: datetime) -> float:
    """
    Calculate fractional days between the last review and `now`.

    Args:
        last_review: Timestamp of last review, or None for never reviewed
        now: Caller-supplied current time

    Returns:
        Elapsed days (0 if never reviewed or if `now` precedes the last review)
    """
    if last_review is None:
        return 0.0

    delta = now - last_review
    return max(0.0, delta.total_seconds() / SECONDS_PER_DAY)


def calculate_retrievability(stability: float, elapsed_days: float) -> float:
    """
    Calculate retrievability using the FSRS power forgetting curve.

    Formula: R = (1 + t / (9 * S))^-1

    Interpretation:
    - Immediately after review: R = 1.0
    - At t = S: R = 0.9
    - Decays as a power law, so old memories fade slowly

    Args:
        stability: Current stability in days
        elapsed_days: Time since last review in days

    Returns:
        Retrievability between 0 and 1
    """
    if elapsed_days <= 0:
        return 1.0

    return 1.0 / (1.0 + elapsed_days / (9.0 * stability))


def get_card_retrievability(card: CardState, now: datetime) -> Optional[float]:
    """Current retrievability of a card, or None for a card never reviewed."""
    if card.stability is None or card.last_review is None:
        return None
    return calculate_retrievability(card.stability, get_elapsed_days(card.last_review, now))
