"""DTOs for review use cases."""

from dataclasses import dataclass

from flashdeck.domain.learning.entities import CramSessionStats, Flashcard
from flashdeck.domain.learning.value_objects import Grade


@dataclass
class ReviewOutcome:
    """Result of grading one card, scheduled or crammed."""

    flashcard: Flashcard
    grade: Grade
    cram: bool
    cram_stats: CramSessionStats | None = None
