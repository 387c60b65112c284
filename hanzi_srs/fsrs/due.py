"""
Due-set selection for review sessions.

Given all of a learner's cards, decide which are due and in what order.
Read-only: cards are returned as given, never modified.

Priority order:
1. New cards (never scheduled)
2. Learning / Relearning cards
3. Review cards
Within a tier, earliest next_review first.
"""

from __future__ import annotations
from datetime import datetime
from typing import Iterable

from hanzi_srs.fsrs.constants import CardPhase
from hanzi_srs.fsrs.memory_state import CardState
from hanzi_srs.fsrs.validation import validate_limit


PHASE_PRIORITY = {
    CardPhase.NEW: 0,
    CardPhase.LEARNING: 1,
    CardPhase.RELEARNING: 1,
    CardPhase.REVIEW: 2,
}


def is_due(card: CardState, now: datetime) -> bool:
    """
    A card is due if its next review has passed, or if it is New
    and has never been scheduled.
    """
    if card.next_review is None:
        return card.state == CardPhase.NEW
    return card.next_review <= now


def _sort_key(card: CardState):
    # Unset next_review sorts before any timestamp
    unscheduled = card.next_review is None
    return (
        PHASE_PRIORITY[CardPhase(card.state)],
        not unscheduled,
        card.next_review if not unscheduled else datetime.min,
    )


def select_due(
    cards: Iterable[CardState],
    now: datetime,
    limit: int
) -> list[CardState]:
    """
    Build the next review batch.

    Args:
        cards: All cards of one learner
        now: Caller-supplied current time
        limit: Maximum number of cards to return

    Returns:
        Due cards in priority order, at most `limit`

    Raises:
        InvalidRequestError: if limit is negative
    """
    validate_limit(limit)
    due = [card for card in cards if is_due(card, now)]
    due.sort(key=_sort_key)
    return due[:limit]


def count_due(cards: Iterable[CardState], now: datetime) -> int:
    return sum(1 for card in cards if is_due(card, now))
