from django.utils import timezone
from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..services.reviews import (
    CatalogItemNotFound,
    deck_stats,
    deck_words,
    due_reviews,
    record_review,
)
from ..utils.time import to_local_iso
from .serializers import (
    DeckStatsSerializer,
    DueQuerySerializer,
    DueWordSerializer,
    OutcomeInSerializer,
    ReviewRecordSerializer,
    WordSerializer,
)

base_logger = structlog.get_logger()


class StudyView(views.APIView):
    """Binds a request_id logger and rejects anonymous callers."""

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        # Create a unique request_id
        self.logger = base_logger.bind(request_id=str(uuid.uuid4()))

    def unauthenticated(self):
        return Response(
            {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
        )

    def not_found(self, exc):
        self.logger.info("catalog_item_not_found", error=str(exc))
        return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)


class RecordOutcomeView(StudyView):
    def post(self, request):
        if not request.user.is_authenticated:
            return self.unauthenticated()

        s = OutcomeInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        try:
            record, created = record_review(
                request.user,
                s.validated_data["word_id"],
                s.validated_data["deck_id"],
                s.validated_data["correct"],
                s.validated_data["time_spent"],
            )
        except CatalogItemNotFound as exc:
            return self.not_found(exc)

        status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK

        self.logger.info(
            "review_api_response",
            user_id=str(request.user.pk),
            word_id=str(record.word_id),
            deck_id=str(record.deck_id),
            correct=s.validated_data["correct"],
            streak=record.consecutive_correct,
            next_review_utc=record.next_review.isoformat(),
            next_review_local=to_local_iso(record.next_review),
            status=status_code,
        )

        return Response(ReviewRecordSerializer(record).data, status=status_code)


class DueWordsView(StudyView):
    def get(self, request):
        if not request.user.is_authenticated:
            return self.unauthenticated()

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        until = qs.validated_data.get("until") or timezone.now()

        records = due_reviews(request.user, as_of=until)

        self.logger.info(
            "due_words_api_response",
            user_id=str(request.user.pk),
            until_utc=until.isoformat(),
            until_local=to_local_iso(until),
            word_count=len(records),
        )

        return Response(
            {
                "until_utc": until.isoformat(),
                "until_local": to_local_iso(until),
                "words": DueWordSerializer(records, many=True).data,
            }
        )


class DeckStatsView(StudyView):
    def get(self, request, deck_id):
        if not request.user.is_authenticated:
            return self.unauthenticated()

        try:
            stats = deck_stats(request.user, deck_id)
        except CatalogItemNotFound as exc:
            return self.not_found(exc)

        self.logger.info(
            "deck_stats_api_response",
            user_id=str(request.user.pk),
            deck_id=str(deck_id),
            total_words=stats.total_words,
            mastered_words=stats.mastered_words,
        )

        return Response(DeckStatsSerializer(stats).data)


class DeckWordsView(StudyView):
    def get(self, request, deck_id):
        if not request.user.is_authenticated:
            return self.unauthenticated()

        try:
            words = deck_words(request.user, deck_id)
        except CatalogItemNotFound as exc:
            return self.not_found(exc)

        return Response(WordSerializer(words, many=True).data)
