from django.db import IntegrityError, transaction
from django.utils.dateparse import parse_datetime

from ..domain.entities import HistoryEntry, ReviewState
from .models import ReviewRecord


def lock_record(user_id, word_id, deck_id):
    """
    Fetch the record for the triple and lock it for update to avoid races.
    Must be called inside transaction.atomic(); returns None if missing.
    """
    return (ReviewRecord.objects
            .select_for_update()
            .filter(user_id=user_id, word_id=word_id, deck_id=deck_id)
            .first())


def create_record(user_id, word_id, deck_id, state):
    """
    Insert the first record for a triple.
    Returns None if a concurrent writer created the triple first.
    """
    try:
        # Savepoint, so a duplicate does not poison the caller's transaction
        with transaction.atomic():
            return ReviewRecord.objects.create(
                user_id=user_id, word_id=word_id, deck_id=deck_id,
                **_state_fields(state)
            )
    except IntegrityError:
        return None


def save_state(record, state):
    fields = _state_fields(state)
    for name, value in fields.items():
        setattr(record, name, value)
    record.save(update_fields=list(fields))
    return record


def to_state(record):
    if record is None:
        return None
    return ReviewState(
        last_studied=record.last_studied,
        next_review=record.next_review,
        times_studied=record.times_studied,
        times_correct=record.times_correct,
        consecutive_correct=record.consecutive_correct,
        time_spent=record.time_spent,
        history=tuple(
            HistoryEntry(
                timestamp=parse_datetime(item["timestamp"]),
                correct=item["correct"],
                time_spent=item.get("time_spent", 0.0),
            )
            for item in record.history
        ),
    )


def records_for_user(user_id, until=None):
    """All records of a user, soonest review first; optionally only those due by ``until``."""
    qs = ReviewRecord.objects.filter(user_id=user_id)
    if until is not None:
        qs = qs.filter(next_review__lte=until)
    return qs.select_related("word").order_by("next_review", "id")


def records_for_deck(user_id, deck_id):
    return ReviewRecord.objects.filter(user_id=user_id, deck_id=deck_id)


def _state_fields(state):
    return {
        "last_studied": state.last_studied,
        "next_review": state.next_review,
        "times_studied": state.times_studied,
        "times_correct": state.times_correct,
        "consecutive_correct": state.consecutive_correct,
        "time_spent": state.time_spent,
        "history": [
            {
                "timestamp": entry.timestamp.isoformat(),
                "correct": entry.correct,
                "time_spent": entry.time_spent,
            }
            for entry in state.history
        ],
    }
