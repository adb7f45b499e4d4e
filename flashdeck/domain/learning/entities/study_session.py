"""Per-instance study session: navigation position and cram statistics."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from flashdeck.domain.common.value_objects import FlashcardId
from flashdeck.domain.learning.value_objects import Grade


@dataclass
class CramSessionStats:
    """
    Practice counters for cram mode.

    These live only in the session; cram reviews never reach a card's
    scheduling fields.
    """

    cards_reviewed: int = 0
    correct_answers: int = 0
    session_start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    total_cards: int = 0
    reviewed_card_ids: set[str] = field(default_factory=set)

    @property
    def unique_cards_reviewed(self) -> int:
        return len(self.reviewed_card_ids)

    @property
    def accuracy_rate(self) -> int:
        """Percentage of cram reviews graded as passing."""
        if self.cards_reviewed == 0:
            return 0
        return _percent(self.correct_answers, self.cards_reviewed)

    @property
    def completion_rate(self) -> int:
        """Percentage of the deck touched at least once this session."""
        if self.total_cards == 0:
            return 0
        return _percent(self.unique_cards_reviewed, self.total_cards)

    @property
    def is_complete(self) -> bool:
        return self.total_cards > 0 and self.unique_cards_reviewed >= self.total_cards


def _percent(part: int, whole: int) -> int:
    # Half-up, matching how the rates were always displayed
    return (part * 200 + whole) // (whole * 2)


@dataclass
class StudySession:
    """Review navigation state for the selected deck."""

    current_card_index: int = 0
    cram_mode: bool = False
    cram_stats: CramSessionStats = field(default_factory=CramSessionStats)

    def record_cram_review(self, card_id: FlashcardId, grade: Grade) -> None:
        """Count a practice answer without touching the card."""
        self.cram_stats.reviewed_card_ids.add(card_id.value)
        self.cram_stats.cards_reviewed += 1
        if grade.is_passing:
            self.cram_stats.correct_answers += 1

    def reset_cram_stats(self, total_cards: int, now: datetime | None = None) -> None:
        self.cram_stats = CramSessionStats(
            session_start_time=now or datetime.now(UTC),
            total_cards=total_cards,
        )

    def reset(self) -> None:
        """Leave cram mode and clear all session progress."""
        self.current_card_index = 0
        self.cram_mode = False
        self.reset_cram_stats(total_cards=0)
