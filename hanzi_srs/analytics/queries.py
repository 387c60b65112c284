"""
Data loading for notebook statistics.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

import pandas as pd

from hanzi_srs.fsrs import database
from hanzi_srs.fsrs.due import is_due
from hanzi_srs.fsrs.familiarity import card_familiarity
from hanzi_srs.fsrs.memory_state import CardState


CARD_COLUMNS = ["character", "state", "stability", "familiarity", "last_review", "is_due"]


def cards_to_df(cards: Iterable[CardState], now: datetime) -> pd.DataFrame:
    """
    One row per card with the derived columns the metrics need.
    """
    rows = [
        {
            "character": card.character,
            "state": int(card.state),
            "stability": card.stability,
            "familiarity": card_familiarity(card),
            "last_review": card.last_review,
            "is_due": is_due(card, now),
        }
        for card in cards
    ]
    if not rows:
        return pd.DataFrame(columns=CARD_COLUMNS)

    df = pd.DataFrame(rows, columns=CARD_COLUMNS)
    df["last_review"] = pd.to_datetime(df["last_review"], utc=True)
    return df


def load_notebook_df(user_id: str, now: datetime) -> pd.DataFrame:
    """Load a learner's cards from the database as a DataFrame."""
    return cards_to_df(database.load_user_cards(user_id), now)
