import pytest
from django.contrib.auth import get_user_model

from vocab.models import Deck, Word

User = get_user_model()


@pytest.fixture
def user(db):
    return User.objects.create_user(username="learner")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="stranger")


@pytest.fixture
def words(user):
    return [
        Word.objects.create(user=user, word=w, translation=t, example=f"{w}!")
        for w, t in [("apple", "苹果"), ("borrow", "借"), ("candle", "蜡烛")]
    ]


@pytest.fixture
def deck(user, words):
    deck = Deck.objects.create(user=user, name="Everyday")
    deck.words.add(*words)
    return deck


@pytest.fixture
def word(words):
    return words[0]
