from rest_framework import serializers
from vocab.models import Word
from ..data.models import ReviewRecord

MAX_TIME_SPENT = 24 * 3600  # one answer never takes longer than a day

class OutcomeInSerializer(serializers.Serializer):
    word_id = serializers.UUIDField()
    deck_id = serializers.UUIDField()
    correct = serializers.BooleanField()
    time_spent = serializers.FloatField(min_value=0, max_value=MAX_TIME_SPENT, default=0)  # seconds

class DueQuerySerializer(serializers.Serializer):
    until = serializers.DateTimeField(required=False)  # ISO-8601, defaults to now

class ReviewRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = ReviewRecord
        fields = [
            "id", "word", "deck", "last_studied", "next_review",
            "times_studied", "times_correct", "consecutive_correct",
            "time_spent", "history",
        ]
        read_only_fields = fields

class WordSerializer(serializers.ModelSerializer):
    class Meta:
        model = Word
        fields = ["id", "word", "translation", "example", "pronunciation"]
        read_only_fields = fields

class DueWordSerializer(serializers.Serializer):
    """Word content joined with the scheduling fields of its record."""
    word = WordSerializer()
    record_id = serializers.IntegerField(source="id")
    deck_id = serializers.UUIDField()
    last_studied = serializers.DateTimeField()
    next_review = serializers.DateTimeField()
    consecutive_correct = serializers.IntegerField()

class DeckStatsSerializer(serializers.Serializer):
    total_words = serializers.IntegerField()
    studied_words = serializers.IntegerField()
    mastered_words = serializers.IntegerField()
    today_studied = serializers.IntegerField()
    accuracy = serializers.FloatField()
    average_time_spent = serializers.FloatField()
