import uuid

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom User model that extends the default Django User model.
    Accounts are managed outside this service; the model only anchors ownership.
    """

    pass


###############################################################################
## Word catalog
##
## Read-only from the scheduler's point of view: it checks ownership, counts
## the words of a deck and joins word content into due-item responses.


class Word(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="words"
    )
    word = models.CharField(max_length=255)
    translation = models.CharField(max_length=255)
    example = models.TextField(blank=True, default="")
    pronunciation = models.CharField(max_length=255, blank=True, default="")
    tags = models.JSONField(default=list, blank=True)
    date_added = models.DateTimeField(auto_now_add=True)
    last_modified = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.word


class Deck(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="decks"
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    words = models.ManyToManyField(Word, blank=True, related_name="decks")
    is_public = models.BooleanField(default=False)
    date_created = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name
