"""Learning domain services."""

from .conflict_resolver import (
    ConflictRecord,
    ConflictResolver,
    ImportStrategy,
    MergeResult,
)
from .sm2_scheduler import Sm2Scheduler
from .stats_aggregator import DeckStats, FlashcardStats, deck_stats, overall_stats

__all__ = [
    "ConflictRecord",
    "ConflictResolver",
    "DeckStats",
    "FlashcardStats",
    "ImportStrategy",
    "MergeResult",
    "Sm2Scheduler",
    "deck_stats",
    "overall_stats",
]
