from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: datetime
    correct: bool
    time_spent: float = 0.0


@dataclass(frozen=True)
class ReviewState:
    """
    Scheduling state of one (user, word, deck) review record.
    Knows nothing about the database; identity lives on the stored row.
    """

    last_studied: datetime
    next_review: datetime
    times_studied: int = 0
    times_correct: int = 0
    consecutive_correct: int = 0
    time_spent: float = 0.0
    history: Tuple[HistoryEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DeckStats:
    total_words: int
    studied_words: int
    mastered_words: int
    today_studied: int
    accuracy: float
    average_time_spent: float
