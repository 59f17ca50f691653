from django.conf import settings
from django.db import models
from django.utils import timezone


class ReviewRecord(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="review_records"
    )
    word = models.ForeignKey(
        "vocab.Word", on_delete=models.CASCADE, related_name="review_records"
    )
    deck = models.ForeignKey(
        "vocab.Deck", on_delete=models.CASCADE, related_name="review_records"
    )
    last_studied = models.DateTimeField(default=timezone.now)
    next_review = models.DateTimeField(default=timezone.now)  # UTC
    times_studied = models.PositiveIntegerField(default=0)
    times_correct = models.PositiveIntegerField(default=0)
    consecutive_correct = models.PositiveIntegerField(default=0)
    time_spent = models.FloatField(default=0)  # seconds
    # append-only [{"timestamp", "correct", "time_spent"}, ...]
    history = models.JSONField(default=list, blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["user", "word", "deck"], name="uniq_review_triple"
            ),
        ]
        indexes = [
            models.Index(fields=["user", "next_review"], name="review_user_next_idx"),
        ]
