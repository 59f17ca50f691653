import math
from dataclasses import replace
from datetime import timedelta

from .entities import DeckStats, HistoryEntry, ReviewState
from .policy import DEFAULT_POLICY, SchedulerPolicy


def next_interval_days(streak: int, policy: SchedulerPolicy = DEFAULT_POLICY) -> int:
    """Days until the next review after ``streak`` consecutive correct answers."""
    if streak <= 0:
        return 0
    try:
        days = policy.first_interval_days * policy.growth ** (streak - 1)
    except OverflowError:
        return int(policy.max_interval_days)
    return int(min(policy.max_interval_days, days))


def record_outcome(
    state,
    correct: bool,
    time_spent,
    now,
    policy: SchedulerPolicy = DEFAULT_POLICY,
) -> ReviewState:
    """
    Apply one answer to ``state`` (None for the first attempt) and return the
    new state. The input is never mutated.

    A correct answer extends the streak and pushes the next review out to
    ``next_interval_days(streak)``; a wrong one resets the streak and makes
    the word due immediately.
    """
    # negatives are rejected by the API; clamp anything that slips through
    time_spent = max(0.0, float(time_spent or 0))
    if not math.isfinite(time_spent):
        time_spent = 0.0
    entry = HistoryEntry(timestamp=now, correct=bool(correct), time_spent=time_spent)

    if state is None:
        state = ReviewState(last_studied=now, next_review=now)

    total_time = state.time_spent + time_spent
    if not math.isfinite(total_time):
        total_time = state.time_spent

    streak = state.consecutive_correct + 1 if correct else 0
    return replace(
        state,
        last_studied=now,
        next_review=now + timedelta(days=next_interval_days(streak, policy)),
        times_studied=state.times_studied + 1,
        times_correct=state.times_correct + (1 if correct else 0),
        consecutive_correct=streak,
        time_spent=total_time,
        history=tuple(state.history) + (entry,),
    )


def is_due(record, as_of) -> bool:
    return record.next_review <= as_of


def due_items(records, as_of):
    """Yield the records due at ``as_of``, keeping the input order."""
    for record in records:
        if is_due(record, as_of):
            yield record


def compute_stats(
    records, total_words: int, now, policy: SchedulerPolicy = DEFAULT_POLICY
) -> DeckStats:
    records = list(records)
    since = now - policy.today_window

    total_attempts = sum(r.times_studied for r in records)
    total_correct = sum(r.times_correct for r in records)
    total_time = sum(r.time_spent for r in records)

    if total_attempts > 0:
        accuracy = round(total_correct / total_attempts * 100, 1)
        average_time_spent = total_time / total_attempts
    else:
        accuracy = 0
        average_time_spent = 0

    return DeckStats(
        total_words=total_words,
        studied_words=len(records),
        mastered_words=sum(
            1 for r in records if r.consecutive_correct >= policy.mastery_streak
        ),
        today_studied=sum(1 for r in records if r.last_studied >= since),
        accuracy=accuracy,
        average_time_spent=average_time_spent,
    )
