from django.urls import path
from .views import DeckStatsView, DeckWordsView, DueWordsView, RecordOutcomeView

urlpatterns = [
    path("record", RecordOutcomeView.as_view(), name="record-outcome"),
    path("scheduled", DueWordsView.as_view(), name="due-words"),
    path("stats/<uuid:deck_id>", DeckStatsView.as_view(), name="deck-stats"),
    path("deck/<uuid:deck_id>", DeckWordsView.as_view(), name="deck-words"),
]
