from dataclasses import dataclass
from datetime import timedelta

from ..config import (
    FIRST_INTERVAL_DAYS,
    GROWTH,
    MASTERY_STREAK,
    MAX_INTERVAL_DAYS,
    TODAY_WINDOW,
)


@dataclass(frozen=True)
class SchedulerPolicy:
    """Tunable constants of the review schedule and the deck statistics."""

    max_interval_days: int = MAX_INTERVAL_DAYS
    first_interval_days: int = FIRST_INTERVAL_DAYS
    growth: int = GROWTH
    mastery_streak: int = MASTERY_STREAK
    today_window: timedelta = TODAY_WINDOW


DEFAULT_POLICY = SchedulerPolicy()
