"""
Scheduler - FSRS Algorithm Logic

Pure FSRS scheduling and state transitions (no database calls, no clock).

Main workflow:
1. Validate the grade and the incoming card (caller's data)
2. Pick the branch: first grade, lapse, or successful recall
3. Apply the memory model formulas
4. Derive the interval and next review time
5. Return a new card + interval

Transitions:
    New        --Again-->  Learning
    New        --other-->  Review
    non-New    --Again-->  Relearning
    non-New    --other-->  Review

Database I/O is handled by the database module.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional

from hanzi_srs.fsrs import memory_model, memory_state
from hanzi_srs.fsrs.config import DEFAULT_CONFIG, SchedulerConfig
from hanzi_srs.fsrs.constants import CardPhase, Grade
from hanzi_srs.fsrs.formatting import format_interval
from hanzi_srs.fsrs.validation import validate_card, validate_grade

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleResult:
    """
    Outcome of one review.

    Unpacks as `(card, interval_days)` for callers that only need those;
    `retrievability` is the recall probability at review time (None for
    a card's first grade).
    """
    card: memory_state.CardState
    interval_days: float
    retrievability: Optional[float] = None

    def __iter__(self):
        return iter((self.card, self.interval_days))


@dataclass(frozen=True)
class Scheduler:
    """
    FSRS-5 scheduler bound to one configuration.

    Stateless apart from its config; safe to share between threads.
    """
    config: SchedulerConfig = DEFAULT_CONFIG

    def schedule(
        self,
        card: memory_state.CardState,
        grade: Grade,
        now: datetime
    ) -> ScheduleResult:
        """
        Apply a grade to a card and compute the next review.

        The input card is not modified.

        Args:
            card: Current memory state (may be New)
            grade: AGAIN, HARD, GOOD or EASY (plain ints 1-4 accepted)
            now: Review timestamp, supplied by the caller

        Returns:
            ScheduleResult with the new card and interval in days

        Raises:
            InvalidGradeError: grade outside 1-4
            InvalidCardStateError: card breaks a memory-state invariant
        """
        grade = validate_grade(grade)
        validate_card(card)

        w = self.config.weights
        retrievability = None

        if card.state == CardPhase.NEW:
            stability = memory_model.initial_stability(grade, w)
            difficulty = memory_model.initial_difficulty(grade, w)
            state = CardPhase.LEARNING if grade == Grade.AGAIN else CardPhase.REVIEW
            reps = 1
            lapses = 0
        elif grade == Grade.AGAIN:
            stability, difficulty = memory_model.update_on_failure(
                card.stability, card.difficulty, w
            )
            state = CardPhase.RELEARNING
            reps = card.reps + 1
            lapses = card.lapses + 1
        else:
            elapsed = memory_state.get_elapsed_days(card.last_review, now)
            retrievability = memory_state.calculate_retrievability(card.stability, elapsed)
            difficulty = memory_model.update_difficulty_on_success(card.difficulty, grade, w)
            stability = memory_model.update_stability_on_success(
                card.stability, difficulty, retrievability, grade, w
            )
            state = CardPhase.REVIEW
            reps = card.reps + 1
            lapses = card.lapses

        interval_days = memory_model.next_interval(
            stability,
            self.config.target_retention,
            self.config.max_interval_days
        )

        updated = replace(
            card,
            state=state,
            stability=stability,
            difficulty=difficulty,
            reps=reps,
            lapses=lapses,
            last_review=now,
            next_review=now + timedelta(days=interval_days),
        )

        logger.debug(
            "Scheduled %s/%s: %s -> %s (grade=%s, S=%.4f, D=%.4f, interval=%sd)",
            card.user_id, card.character, CardPhase(card.state).name, state.name,
            grade.name, stability, difficulty, interval_days
        )

        return ScheduleResult(updated, interval_days, retrievability)

    def preview_intervals(
        self,
        card: memory_state.CardState,
        now: datetime
    ) -> dict[str, str]:
        """
        Formatted interval for every grade, e.g. for answer buttons.

        Runs `schedule` once per grade against the same card and discards
        the resulting states.

        Returns:
            {"again": ..., "hard": ..., "good": ..., "easy": ...}
        """
        return {
            grade.name.lower(): format_interval(self.schedule(card, grade, now).interval_days)
            for grade in Grade
        }


def schedule(
    card: memory_state.CardState,
    grade: Grade,
    now: datetime,
    config: Optional[SchedulerConfig] = None
) -> ScheduleResult:
    """Schedule with a one-off Scheduler (default config unless given)."""
    return Scheduler(config or DEFAULT_CONFIG).schedule(card, grade, now)


def preview_intervals(
    card: memory_state.CardState,
    now: datetime,
    config: Optional[SchedulerConfig] = None
) -> dict[str, str]:
    """Preview intervals with a one-off Scheduler (default config unless given)."""
    return Scheduler(config or DEFAULT_CONFIG).preview_intervals(card, now)
