import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.urls import reverse

from scheduler.data.models import ReviewRecord
from scheduler.services.reviews import record_review
from vocab.models import Deck, User, Word


@pytest.mark.django_db
def test_init_data_seeds_users_decks_and_words():
    call_command("init_data")

    owner = User.objects.get(username="testuser")
    assert owner.is_superuser
    assert User.objects.filter(username__startswith="testuser").count() == 4

    decks = {d.name: d for d in Deck.objects.filter(user=owner)}
    assert set(decks) == {"Everyday English", "Travel"}
    assert decks["Everyday English"].words.count() == 4
    assert Word.objects.filter(user=owner).count() == 7


@pytest.mark.django_db
def test_init_data_replaces_existing_data():
    call_command("init_data")
    owner = User.objects.get(username="testuser")
    deck = Deck.objects.filter(user=owner).first()
    record_review(owner, deck.words.first().pk, deck.pk, True)

    call_command("init_data")

    assert ReviewRecord.objects.count() == 0
    assert Deck.objects.count() == 3


@pytest.mark.django_db
def test_init_data_missing_file():
    with pytest.raises(CommandError):
        call_command("init_data", file="does-not-exist.json")


@pytest.mark.django_db
def test_init_endpoint_for_staff(client):
    User.objects.create_user("admin", is_staff=True)
    resp = client.post(
        reverse("init-data"), data={}, content_type="application/json",
        HTTP_X_USER_NAME="admin",
    )

    assert resp.status_code == 200
    assert Deck.objects.count() == 3
    assert not User.objects.filter(username="admin").exists()


@pytest.mark.django_db
@pytest.mark.parametrize("username, status_code", [(None, 401), ("learner", 403)])
def test_init_endpoint_refused_without_staff(client, username, status_code):
    learner = User.objects.create_user("learner")
    headers = {"HTTP_X_USER_NAME": username} if username else {}

    resp = client.post(
        reverse("init-data"), data={}, content_type="application/json", **headers
    )

    assert resp.status_code == status_code
    assert list(User.objects.all()) == [learner]
    assert Deck.objects.count() == 0
