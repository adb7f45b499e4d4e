"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.domain.learning.entities import deck as deck_entity
from flashdeck.domain.learning.services import DeckStats


class DeckCreateRequest(BaseModel):
    """Schema for creating a deck."""

    name: str = Field(..., min_length=1, description="Deck name")
    description: str | None = Field(None, description="Optional description")


class DeckUpdateRequest(BaseModel):
    """Schema for updating a deck. Omitted fields keep their value."""

    name: str | None = Field(None, min_length=1, description="New deck name")
    description: str | None = Field(None, description="New description")
    color: str | None = Field(None, min_length=1, description="New color tag")


class Deck(BaseModel):
    """Schema for Deck response."""

    id: str
    name: str
    description: str | None
    color: str
    created_at: datetime

    @classmethod
    def from_domain(cls, deck: deck_entity.Deck) -> "Deck":
        return cls(
            id=deck.id.value,
            name=deck.name,
            description=deck.description,
            color=deck.color,
            created_at=deck.created_at,
        )


class DeckListResponse(BaseModel):
    """Schema for list of decks response."""

    decks: list[Deck] = Field(..., description="Decks in collection order")
    selected_deck_id: str | None = Field(None, description="Currently selected deck")


class DeckDeleteResponse(BaseModel):
    """Schema for deck deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")
    removed_cards: int = Field(..., description="Number of cards deleted with the deck")


class DeckStatsResponse(BaseModel):
    """Schema for per-deck statistics."""

    deck_id: str
    deck_name: str
    total_cards: int
    due_cards: int
    reviewed_today: int
    average_efactor: float

    @classmethod
    def from_domain(cls, stats: DeckStats) -> "DeckStatsResponse":
        return cls(
            deck_id=stats.deck_id,
            deck_name=stats.deck_name,
            total_cards=stats.total_cards,
            due_cards=stats.due_cards,
            reviewed_today=stats.reviewed_today,
            average_efactor=stats.average_efactor,
        )
