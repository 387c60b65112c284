"""
FSRS Constants and Parameters

All fixed parameters for the FSRS-5 algorithm in one place.
Tunable values (target retention, maximum interval) live in config.py.
"""

from enum import IntEnum


# ---- Grades ----

class Grade(IntEnum):
    """Learner's self-reported recall quality."""
    AGAIN = 1   # Retrieval failed
    HARD = 2    # Retrieved with high effort
    GOOD = 3    # Retrieved normally
    EASY = 4    # Retrieved fluently


# ---- Card Phases ----

class CardPhase(IntEnum):
    """
    Lifecycle phase of a card.

    Integer codes match the persisted `state` column.
    """
    NEW = 0
    LEARNING = 1
    REVIEW = 2
    RELEARNING = 3


# ---- FSRS-5 Default Weights ----
# Order-sensitive: the memory model indexes these positionally (w[0]..w[18]).

DEFAULT_WEIGHTS = (
    0.4072,   # w0: initial stability for Again
    1.1829,   # w1: initial stability for Hard
    3.1262,   # w2: initial stability for Good
    15.4722,  # w3: initial stability for Easy
    7.2102,   # w4: initial difficulty
    0.5316,   # w5: difficulty grade slope / stability decay
    1.0651,   # w6: stability increase factor
    0.0046,   # w7: difficulty step
    1.5418,   # w8
    0.1618,   # w9
    1.0,      # w10: Hard multiplier
    1.9395,   # w11: Easy multiplier
    0.1,      # w12: post-lapse stability coefficient
    0.3,      # w13: post-lapse stability exponent
    2.2698,   # w14: retrievability gain exponent
    0.2315,   # w15
    2.9898,   # w16
    0.5148,   # w17
    0.6881,   # w18
)

WEIGHT_COUNT = 19


# ---- Bounds ----

S_MIN = 0.1      # Minimum stability (days)
D_MIN = 1.0      # Minimum difficulty
D_MAX = 10.0     # Maximum difficulty


# ---- Scheduling Defaults ----

DEFAULT_TARGET_RETENTION = 0.9
DEFAULT_MAX_INTERVAL_DAYS = 36500  # 100 years


# ---- Familiarity ----

FAMILIARITY_MIN = 1
FAMILIARITY_MAX = 5
LEARNING_FAMILIARITY_CAP = 3

# Upper stability bounds (exclusive) for familiarity tiers 1-4; anything above is 5
FAMILIARITY_THRESHOLDS = (1.0, 3.0, 10.0, 30.0)
