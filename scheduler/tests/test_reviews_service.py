import pytest
from datetime import timedelta
from unittest import mock

from django.utils import timezone

from scheduler.data import repos
from scheduler.data.models import ReviewRecord
from scheduler.services.reviews import (
    CatalogItemNotFound,
    deck_stats,
    deck_words,
    due_reviews,
    record_review,
)
from vocab.models import Deck, Word


@pytest.mark.django_db
def test_first_review_creates_record(user, word, deck):
    now = timezone.now()
    record, created = record_review(user, word.pk, deck.pk, True, 10, now=now)

    assert created is True
    assert record.times_studied == 1
    assert record.consecutive_correct == 1
    assert record.next_review == now + timedelta(days=1)
    assert record.history == [
        {"timestamp": now.isoformat(), "correct": True, "time_spent": 10.0}
    ]


@pytest.mark.django_db
def test_second_report_updates_same_triple(user, word, deck):
    now = timezone.now()
    record_review(user, word.pk, deck.pk, False, 4, now=now)
    record, created = record_review(user, word.pk, deck.pk, True, 6, now=now)

    assert created is False
    assert ReviewRecord.objects.filter(user=user, word=word, deck=deck).count() == 1
    record.refresh_from_db()
    assert record.times_studied == 2
    assert record.times_correct == 1
    assert record.time_spent == 10
    assert len(record.history) == 2


@pytest.mark.django_db
def test_same_word_in_two_decks_is_two_records(user, word, deck):
    other_deck = Deck.objects.create(user=user, name="Second")
    other_deck.words.add(word)

    record_review(user, word.pk, deck.pk, True)
    record_review(user, word.pk, other_deck.pk, True)

    assert ReviewRecord.objects.filter(user=user, word=word).count() == 2


@pytest.mark.django_db
def test_lost_insert_race_falls_back_to_update(user, word, deck):
    """A concurrent writer creating the triple first turns our insert into an update."""
    now = timezone.now()
    record_review(user, word.pk, deck.pk, True, 5, now=now)

    real_lock = repos.lock_record
    calls = []

    def lock_missing_once(*args):
        calls.append(args)
        return None if len(calls) == 1 else real_lock(*args)

    with mock.patch("scheduler.services.reviews.lock_record", side_effect=lock_missing_once):
        record, created = record_review(
            user, word.pk, deck.pk, True, 5, now=now + timedelta(days=1)
        )

    assert created is False
    assert len(calls) == 2
    assert ReviewRecord.objects.count() == 1
    record.refresh_from_db()
    assert record.times_studied == 2
    assert record.consecutive_correct == 2
    assert record.next_review == now + timedelta(days=1) + timedelta(days=2)


@pytest.mark.django_db
def test_end_to_end_three_answers(user, word, deck):
    day1 = timezone.now()
    record, _ = record_review(user, word.pk, deck.pk, True, 10, now=day1)
    assert record.next_review == record.last_studied + timedelta(days=1)

    day2 = day1 + timedelta(days=1)
    record, _ = record_review(user, word.pk, deck.pk, True, 10, now=day2)
    assert record.consecutive_correct == 2
    assert record.next_review == record.last_studied + timedelta(days=2)

    day3 = day2 + timedelta(days=2)
    record, _ = record_review(user, word.pk, deck.pk, False, 10, now=day3)
    assert record.consecutive_correct == 0
    assert record.next_review == record.last_studied

    stored = repos.to_state(ReviewRecord.objects.get(pk=record.pk))
    assert [e.timestamp for e in stored.history] == [day1, day2, day3]


@pytest.mark.django_db
def test_foreign_word_or_deck_is_rejected(user, other_user, word, deck):
    foreign_word = Word.objects.create(user=other_user, word="x", translation="y")
    foreign_deck = Deck.objects.create(user=other_user, name="theirs")

    with pytest.raises(CatalogItemNotFound):
        record_review(user, foreign_word.pk, deck.pk, True)
    with pytest.raises(CatalogItemNotFound):
        record_review(user, word.pk, foreign_deck.pk, True)
    with pytest.raises(CatalogItemNotFound):
        deck_stats(user, foreign_deck.pk)

    assert ReviewRecord.objects.count() == 0


@pytest.mark.django_db
def test_due_reviews_most_overdue_first(user, words, deck):
    now = timezone.now()
    record_review(user, words[0].pk, deck.pk, False, now=now - timedelta(hours=1))
    record_review(user, words[1].pk, deck.pk, False, now=now - timedelta(hours=3))
    record_review(user, words[2].pk, deck.pk, True, now=now)

    due = due_reviews(user, as_of=now)

    assert [r.word_id for r in due] == [words[1].pk, words[0].pk]
    assert due_reviews(user, as_of=now + timedelta(days=1))[-1].word_id == words[2].pk
    assert due_reviews(user, as_of=now - timedelta(days=1)) == []


@pytest.mark.django_db
def test_due_reviews_only_for_caller(user, other_user, word, deck):
    record_review(user, word.pk, deck.pk, False)

    assert due_reviews(other_user) == []


@pytest.mark.django_db
def test_deck_stats_reflect_latest_writes(user, words, deck):
    now = timezone.now()
    assert deck_stats(user, deck.pk, now=now).studied_words == 0

    for _ in range(3):
        record_review(user, words[0].pk, deck.pk, True, 2, now=now)
    record_review(user, words[1].pk, deck.pk, False, 4, now=now)

    stats = deck_stats(user, deck.pk, now=now)

    assert stats.total_words == 3
    assert stats.studied_words == 2
    assert stats.mastered_words == 1
    assert stats.today_studied == 2
    assert stats.accuracy == 75.0
    assert stats.average_time_spent == 2.5


@pytest.mark.django_db
def test_mastery_threshold_from_settings(settings, user, word, deck):
    settings.SCHEDULER = {"MASTERY_STREAK": 2}
    record_review(user, word.pk, deck.pk, True)
    record_review(user, word.pk, deck.pk, True)

    assert deck_stats(user, deck.pk).mastered_words == 1


@pytest.mark.django_db
def test_deck_words(user, words, deck):
    assert set(deck_words(user, deck.pk)) == set(words)
