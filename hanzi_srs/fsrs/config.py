"""
Scheduler configuration

Tunables are an explicit value threaded into the Scheduler at construction.
`load_config()` builds one from the environment (and a local .env file).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from hanzi_srs.fsrs.constants import (
    DEFAULT_MAX_INTERVAL_DAYS,
    DEFAULT_TARGET_RETENTION,
    DEFAULT_WEIGHTS,
    WEIGHT_COUNT,
)


@dataclass(frozen=True)
class SchedulerConfig:
    """
    Parameters of one scheduler instance.

    Attributes:
        weights: FSRS-5 weight vector w[0..18], positional
        target_retention: Desired recall probability at the next review
        max_interval_days: Upper bound on any scheduled interval
    """
    weights: tuple[float, ...] = field(default=DEFAULT_WEIGHTS)
    target_retention: float = DEFAULT_TARGET_RETENTION
    max_interval_days: int = DEFAULT_MAX_INTERVAL_DAYS

    def __post_init__(self):
        if len(self.weights) != WEIGHT_COUNT:
            raise ValueError(
                f"Expected {WEIGHT_COUNT} weights, got {len(self.weights)}"
            )
        if not 0.0 < self.target_retention < 1.0:
            raise ValueError(
                f"target_retention must be in (0, 1), got {self.target_retention}"
            )
        if self.max_interval_days <= 0:
            raise ValueError(
                f"max_interval_days must be positive, got {self.max_interval_days}"
            )
        # Lists are accepted but stored as a tuple so the config stays hashable
        object.__setattr__(self, "weights", tuple(float(w) for w in self.weights))


DEFAULT_CONFIG = SchedulerConfig()


def load_config() -> SchedulerConfig:
    """
    Build a SchedulerConfig from environment variables.

    Reads (after loading .env if present):
        FSRS_TARGET_RETENTION: float in (0, 1), default 0.9
        FSRS_MAX_INTERVAL_DAYS: positive int, default 36500

    Raises:
        ValueError: if a variable is set but not a valid number
    """
    load_dotenv()

    retention = os.getenv("FSRS_TARGET_RETENTION")
    max_interval = os.getenv("FSRS_MAX_INTERVAL_DAYS")

    return SchedulerConfig(
        target_retention=float(retention) if retention else DEFAULT_TARGET_RETENTION,
        max_interval_days=int(max_interval) if max_interval else DEFAULT_MAX_INTERVAL_DAYS,
    )
