"""
FSRS - Free Spaced Repetition Scheduler

Review scheduling for the character notebook.

This module implements the FSRS-5 memory model with:
- Power forgetting curve: R = (1 + t / (9S))^-1
- Interpretable memory state (Stability, Difficulty, Retrievability)
- New / Learning / Review / Relearning card phases
- Due-set selection and a coarse 1-5 familiarity tier

Quick start:
    from hanzi_srs import fsrs

    # Grade a card (algorithm only, no DB calls)
    result = fsrs.schedule(card, fsrs.Grade.GOOD, now)
    card, interval_days = result

    # Button labels for each grade
    labels = fsrs.preview_intervals(card, now)

    # Next review batch
    batch = fsrs.select_due(cards, now, limit=50)
"""

# Core scheduler API (algorithm logic)
from hanzi_srs.fsrs.scheduler import (
    Scheduler,
    ScheduleResult,
    schedule,
    preview_intervals
)

# Configuration
from hanzi_srs.fsrs.config import DEFAULT_CONFIG, SchedulerConfig, load_config

# Constants and enums
from hanzi_srs.fsrs.constants import (
    CardPhase,
    Grade,
    DEFAULT_WEIGHTS,
    DEFAULT_TARGET_RETENTION,
    DEFAULT_MAX_INTERVAL_DAYS,
    S_MIN,
    D_MIN,
    D_MAX
)

# Memory state
from hanzi_srs.fsrs.memory_state import (
    CardState,
    new_card,
    calculate_retrievability,
    get_elapsed_days,
    get_card_retrievability
)

# Selection and display
from hanzi_srs.fsrs.due import select_due, is_due, count_due
from hanzi_srs.fsrs.familiarity import calculate_familiarity, card_familiarity
from hanzi_srs.fsrs.formatting import format_interval

# Errors
from hanzi_srs.fsrs.validation import (
    SchedulingError,
    InvalidGradeError,
    InvalidCardStateError,
    InvalidRequestError
)


__all__ = [
    # Core algorithm
    "Scheduler",
    "ScheduleResult",
    "schedule",
    "preview_intervals",

    # Configuration
    "DEFAULT_CONFIG",
    "SchedulerConfig",
    "load_config",

    # Enums
    "CardPhase",
    "Grade",

    # Memory state
    "CardState",
    "new_card",
    "calculate_retrievability",
    "get_elapsed_days",
    "get_card_retrievability",

    # Selection and display
    "select_due",
    "is_due",
    "count_due",
    "calculate_familiarity",
    "card_familiarity",
    "format_interval",

    # Errors
    "SchedulingError",
    "InvalidGradeError",
    "InvalidCardStateError",
    "InvalidRequestError",

    # Parameters
    "DEFAULT_WEIGHTS",
    "DEFAULT_TARGET_RETENTION",
    "DEFAULT_MAX_INTERVAL_DAYS",
    "S_MIN",
    "D_MIN",
    "D_MAX",
]
