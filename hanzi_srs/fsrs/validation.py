"""
Validation - boundary checks for scheduler inputs

The memory model assumes validated input. Everything that enters the
scheduler from the outside (grades typed by a learner, card states read
back from storage) is checked here first.
"""

from __future__ import annotations
import math

from hanzi_srs.fsrs.constants import CardPhase, Grade, D_MIN, D_MAX


class SchedulingError(ValueError):
    """Base class for contract violations rejected by the scheduler."""


class InvalidGradeError(SchedulingError):
    """Grade is not one of Again/Hard/Good/Easy."""


class InvalidCardStateError(SchedulingError):
    """Card state read from a collaborator breaks a memory-state invariant."""


class InvalidRequestError(SchedulingError):
    """Malformed request parameter (e.g. negative limit)."""


def validate_grade(grade) -> Grade:
    """
    Coerce a raw grade into a Grade.

    Accepts a Grade or a plain int in 1..4. Booleans are rejected even
    though they are ints.

    Raises:
        InvalidGradeError: if the value is not a valid grade
    """
    if isinstance(grade, bool) or not isinstance(grade, int):
        raise InvalidGradeError(f"Grade must be an integer 1-4, got {grade!r}")
    try:
        return Grade(grade)
    except ValueError:
        raise InvalidGradeError(f"Grade must be 1-4, got {grade}") from None


def validate_card(card) -> None:
    """
    Check a CardState against the memory-state invariants.

    Raises:
        InvalidCardStateError: describing the first violated invariant
    """
    label = f"{card.user_id}/{card.character}"

    try:
        phase = CardPhase(card.state)
    except ValueError:
        raise InvalidCardStateError(f"{label}: unknown state {card.state!r}") from None

    if card.reps < 0 or card.lapses < 0:
        raise InvalidCardStateError(
            f"{label}: reps and lapses must be non-negative "
            f"(reps={card.reps}, lapses={card.lapses})"
        )

    if phase == CardPhase.NEW:
        if card.reps != 0 or card.last_review is not None:
            raise InvalidCardStateError(
                f"{label}: a New card cannot have reps or a last review"
            )
        return

    if card.stability is None or card.difficulty is None:
        raise InvalidCardStateError(
            f"{label}: {phase.name} card is missing stability or difficulty"
        )
    if not (math.isfinite(card.stability) and math.isfinite(card.difficulty)):
        raise InvalidCardStateError(
            f"{label}: stability and difficulty must be finite "
            f"(stability={card.stability}, difficulty={card.difficulty})"
        )
    if card.stability <= 0:
        raise InvalidCardStateError(
            f"{label}: stability must be positive, got {card.stability}"
        )
    if not D_MIN <= card.difficulty <= D_MAX:
        raise InvalidCardStateError(
            f"{label}: difficulty must be within [{D_MIN}, {D_MAX}], got {card.difficulty}"
        )
    if card.last_review is None:
        raise InvalidCardStateError(
            f"{label}: {phase.name} card has no last review timestamp"
        )


def validate_limit(limit: int) -> int:
    """Reject negative or non-integer batch limits."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidRequestError(f"limit must be a non-negative integer, got {limit!r}")
    return limit
