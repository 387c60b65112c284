"""
Metric computations for notebook statistics.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pandas as pd

from hanzi_srs.fsrs.constants import FAMILIARITY_MAX


def count_by_state(cards_df: pd.DataFrame) -> dict[int, int]:
    """
    Number of cards per stored state code (0=new ... 3=relearning).
    """
    if cards_df.empty:
        return {}
    counts = cards_df["state"].value_counts().sort_index()
    return {int(state): int(count) for state, count in counts.items()}


def count_by_familiarity(cards_df: pd.DataFrame) -> dict[int, int]:
    """
    Number of cards per familiarity tier, ascending.
    """
    if cards_df.empty:
        return {}
    counts = cards_df["familiarity"].value_counts().sort_index()
    return {int(tier): int(count) for tier, count in counts.items()}


def compute_known(cards_df: pd.DataFrame) -> int:
    if cards_df.empty:
        return 0
    return int((cards_df["familiarity"] == FAMILIARITY_MAX).sum())


def compute_due(cards_df: pd.DataFrame) -> int:
    if cards_df.empty:
        return 0
    return int(cards_df["is_due"].sum())


def compute_recent_reviews(cards_df: pd.DataFrame, now: datetime, days: int) -> int:
    """
    Cards whose last review falls within the trailing window.
    """
    if cards_df.empty:
        return 0
    since = pd.Timestamp(now - timedelta(days=days))
    if since.tzinfo is None:
        since = since.tz_localize("UTC")
    reviewed = cards_df["last_review"].dropna()
    return int((reviewed >= since).sum())
