"""DTOs for the study session."""

from dataclasses import dataclass

from flashdeck.domain.learning.entities import CramSessionStats, Deck, Flashcard


@dataclass
class StudySnapshot:
    """What the study screen shows right now."""

    selected_deck: Deck | None
    current_card: Flashcard | None
    current_card_index: int
    review_set_size: int
    cram_mode: bool
    cram_stats: CramSessionStats

    @property
    def can_navigate(self) -> bool:
        return self.review_set_size > 1
