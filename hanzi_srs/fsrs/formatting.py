"""
Human-readable interval labels for review buttons.

Display only; nothing here feeds back into scheduling.
"""

from __future__ import annotations

from hanzi_srs.fsrs.memory_model import round_half_up


def format_interval(days: float) -> str:
    """
    Convert a day interval into a coarse display unit.

    Examples:
        0.02 -> "29m", 0.5 -> "12h", 3 -> "3d", 90 -> "3mo", 400 -> "1.1y"
    """
    if days < 1:
        minutes = round_half_up(days * 24 * 60)
        if minutes < 60:
            return f"{minutes}m"
        return f"{round_half_up(minutes / 60)}h"
    if days < 30:
        return f"{round_half_up(days)}d"
    if days < 365:
        return f"{round_half_up(days / 30)}mo"
    return f"{days / 365:.1f}y"
