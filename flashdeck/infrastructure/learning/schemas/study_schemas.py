"""Pydantic schemas for study session and statistics responses."""

from pydantic import BaseModel, Field

from flashdeck.application.learning.use_cases.dtos import StudySnapshot
from flashdeck.domain.learning.services import FlashcardStats
from flashdeck.infrastructure.learning.schemas.cram_schemas import CramStats
from flashdeck.infrastructure.learning.schemas.deck_schemas import DeckStatsResponse
from flashdeck.infrastructure.learning.schemas.flashcard_schemas import Flashcard


class StudySnapshotResponse(BaseModel):
    """Schema for the current study position."""

    selected_deck_id: str | None
    selected_deck_name: str | None
    current_card: Flashcard | None
    current_card_index: int
    review_set_size: int
    can_navigate: bool
    cram_mode: bool
    cram_stats: CramStats

    @classmethod
    def from_domain(cls, snapshot: StudySnapshot) -> "StudySnapshotResponse":
        deck = snapshot.selected_deck
        card = snapshot.current_card
        return cls(
            selected_deck_id=deck.id.value if deck else None,
            selected_deck_name=deck.name if deck else None,
            current_card=Flashcard.from_domain(card) if card else None,
            current_card_index=snapshot.current_card_index,
            review_set_size=snapshot.review_set_size,
            can_navigate=snapshot.can_navigate,
            cram_mode=snapshot.cram_mode,
            cram_stats=CramStats.from_domain(snapshot.cram_stats),
        )


class StatsResponse(BaseModel):
    """Schema for collection-wide statistics."""

    total_cards: int
    due_cards: int
    reviewed_today: int
    average_efactor: float
    decks: list[DeckStatsResponse] = Field(default_factory=list, description="Per-deck stats")

    @classmethod
    def from_domain(
        cls, stats: FlashcardStats, decks: list[DeckStatsResponse]
    ) -> "StatsResponse":
        return cls(
            total_cards=stats.total_cards,
            due_cards=stats.due_cards,
            reviewed_today=stats.reviewed_today,
            average_efactor=stats.average_efactor,
            decks=decks,
        )
