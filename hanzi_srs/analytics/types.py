"""
Types for notebook statistics.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NotebookStats:
    """
    Summary counts for one learner's character notebook.

    `learning` is everything neither New nor fully known (familiarity 5).
    `by_state` is keyed by the stored state code (see CardPhase).
    """
    total: int
    new: int
    learning: int
    known: int
    due: int
    recent_reviews: int
    by_state: dict[int, int]
    by_familiarity: dict[int, int]
