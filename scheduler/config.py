from datetime import timedelta

MAX_INTERVAL_DAYS = 365
FIRST_INTERVAL_DAYS = 1   # first correct answer: due tomorrow
GROWTH = 2                # interval doubles with every extra correct answer
MASTERY_STREAK = 3
TODAY_WINDOW = timedelta(hours=24)  # rolling, not a calendar day


def get_policy():
    """Build the scheduling policy, applying overrides from ``settings.SCHEDULER``."""
    from django.conf import settings

    from .domain.policy import SchedulerPolicy

    overrides = getattr(settings, "SCHEDULER", {}) or {}
    window_hours = overrides.get("TODAY_WINDOW_HOURS")
    return SchedulerPolicy(
        max_interval_days=overrides.get("MAX_INTERVAL_DAYS", MAX_INTERVAL_DAYS),
        first_interval_days=overrides.get("FIRST_INTERVAL_DAYS", FIRST_INTERVAL_DAYS),
        growth=overrides.get("GROWTH", GROWTH),
        mastery_streak=overrides.get("MASTERY_STREAK", MASTERY_STREAK),
        today_window=(
            timedelta(hours=window_hours) if window_hours is not None else TODAY_WINDOW
        ),
    )
