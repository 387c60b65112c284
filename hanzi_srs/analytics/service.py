"""
Service layer to assemble notebook statistics.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

import pandas as pd

from hanzi_srs.analytics.metrics import (
    compute_due,
    compute_known,
    compute_recent_reviews,
    count_by_familiarity,
    count_by_state,
)
from hanzi_srs.analytics.queries import cards_to_df, load_notebook_df
from hanzi_srs.analytics.types import NotebookStats
from hanzi_srs.fsrs.constants import CardPhase
from hanzi_srs.fsrs.memory_state import CardState


RECENT_REVIEW_DAYS = 7


def _build_stats(cards_df: pd.DataFrame, now: datetime, recent_days: int) -> NotebookStats:
    by_state = count_by_state(cards_df)
    total = len(cards_df)
    new = by_state.get(int(CardPhase.NEW), 0)
    known = compute_known(cards_df)

    return NotebookStats(
        total=total,
        new=new,
        learning=total - known - new,
        known=known,
        due=compute_due(cards_df),
        recent_reviews=compute_recent_reviews(cards_df, now, recent_days),
        by_state=by_state,
        by_familiarity=count_by_familiarity(cards_df),
    )


def summarize_notebook(
    cards: Iterable[CardState],
    now: datetime,
    recent_days: int = RECENT_REVIEW_DAYS
) -> NotebookStats:
    """
    Summary counts for a collection of one learner's cards.
    """
    return _build_stats(cards_to_df(cards, now), now, recent_days)


def build_notebook_stats(
    user_id: str,
    now: datetime,
    recent_days: int = RECENT_REVIEW_DAYS
) -> NotebookStats:
    """
    Summary counts for a learner's notebook as stored in the database.
    """
    return _build_stats(load_notebook_df(user_id, now), now, recent_days)
