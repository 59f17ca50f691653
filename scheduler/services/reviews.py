from django.db import transaction
from django.utils import timezone
import structlog
from vocab.models import Deck, Word
from ..config import get_policy
from ..data.repos import (
    create_record,
    lock_record,
    records_for_deck,
    records_for_user,
    save_state,
    to_state,
)
from ..domain.logic import compute_stats, due_items, record_outcome
from ..utils.time import to_local_iso

logger = structlog.get_logger()


class CatalogItemNotFound(LookupError):
    """The word or deck does not exist or belongs to another user."""


def _owned(model, pk, user, label):
    obj = model.objects.filter(pk=pk, user=user).first()
    if obj is None:
        raise CatalogItemNotFound(f"{label} not found")
    return obj


def record_review(user, word_id, deck_id, correct: bool, time_spent=0, now=None):
    logger.info("review_received",
        user_id=str(user.pk),
        word_id=str(word_id),
        deck_id=str(deck_id),
        correct=correct,
        time_spent=time_spent,
    )

    word = _owned(Word, word_id, user, "Word")
    deck = _owned(Deck, deck_id, user, "Deck")
    now = now or timezone.now()
    policy = get_policy()

    # Serialize read-modify-write per (user, word, deck)
    with transaction.atomic():
        record = lock_record(user.pk, word.pk, deck.pk)
        created = record is None
        if created:
            state = record_outcome(None, correct, time_spent, now, policy)
            record = create_record(user.pk, word.pk, deck.pk, state)
            if record is None:
                # Lost the insert race; the row exists now
                logger.info("review_create_conflict",
                    user_id=str(user.pk), word_id=str(word.pk), deck_id=str(deck.pk))
                created = False
                record = lock_record(user.pk, word.pk, deck.pk)
        if not created:
            state = record_outcome(to_state(record), correct, time_spent, now, policy)
            save_state(record, state)

    logger.info("review_scheduled",
        user_id=str(user.pk),
        word_id=str(word.pk),
        deck_id=str(deck.pk),
        created=created,
        streak=record.consecutive_correct,
        times_studied=record.times_studied,
        next_review_utc=record.next_review.isoformat(),
        next_review_local=to_local_iso(record.next_review),
    )

    return record, created


def due_reviews(user, as_of=None):
    """Records due at ``as_of`` with their word joined, most overdue first."""
    as_of = as_of or timezone.now()
    records = list(due_items(records_for_user(user.pk, until=as_of), as_of))
    logger.info("due_reviews_loaded",
        user_id=str(user.pk),
        as_of_utc=as_of.isoformat(),
        count=len(records),
    )
    return records


def deck_stats(user, deck_id, now=None):
    deck = _owned(Deck, deck_id, user, "Deck")
    now = now or timezone.now()
    stats = compute_stats(
        records_for_deck(user.pk, deck.pk), deck.words.count(), now, get_policy()
    )
    logger.info("deck_stats_computed",
        user_id=str(user.pk),
        deck_id=str(deck.pk),
        studied_words=stats.studied_words,
        accuracy=stats.accuracy,
    )
    return stats


def deck_words(user, deck_id):
    deck = _owned(Deck, deck_id, user, "Deck")
    return deck.words.filter(user=user).order_by("date_added")
