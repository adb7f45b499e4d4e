"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from flashdeck.domain.learning.entities import flashcard as flashcard_entity
from flashdeck.infrastructure.learning.schemas.cram_schemas import CramStats


class FlashcardCreateRequest(BaseModel):
    """Schema for creating a flashcard."""

    front: str = Field(..., min_length=1, description="Prompt side of the card")
    back: str = Field(..., min_length=1, description="Answer side of the card")
    deck_id: str | None = Field(None, description="Target deck; the selected deck when omitted")
    front_language: str | None = Field(None, description="Optional language hint for the front")
    back_language: str | None = Field(None, description="Optional language hint for the back")


class FlashcardUpdateRequest(BaseModel):
    """Schema for replacing a flashcard's content."""

    front: str = Field(..., min_length=1, description="New front text")
    back: str = Field(..., min_length=1, description="New back text")
    front_language: str | None = Field(None, description="Front language hint, null clears it")
    back_language: str | None = Field(None, description="Back language hint, null clears it")


class Flashcard(BaseModel):
    """Schema for Flashcard response."""

    id: str
    deck_id: str
    front: str
    back: str
    front_language: str | None
    back_language: str | None
    created_at: datetime
    last_reviewed: datetime | None
    next_review: datetime
    interval: float
    repetition: int
    efactor: float

    @classmethod
    def from_domain(cls, card: flashcard_entity.Flashcard) -> "Flashcard":
        return cls(
            id=card.id.value,
            deck_id=card.deck_id.value,
            front=card.front,
            back=card.back,
            front_language=card.front_language,
            back_language=card.back_language,
            created_at=card.created_at,
            last_reviewed=card.last_reviewed,
            next_review=card.next_review,
            interval=card.interval,
            repetition=card.repetition,
            efactor=card.efactor,
        )


class FlashcardListResponse(BaseModel):
    """Schema for list of flashcards response."""

    flashcards: list[Flashcard] = Field(..., description="List of flashcards")


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class ReviewRequest(BaseModel):
    """Schema for grading a flashcard."""

    # Range and integrality are checked by Grade
    grade: StrictInt | StrictFloat = Field(..., description="Recall grade")
    scale: Literal["sm2", "rating"] = Field(
        "sm2", description="sm2: 0-5 quality of response; rating: 1-5 Again..Perfect"
    )


class ReviewResponse(BaseModel):
    """Schema for review response."""

    flashcard: Flashcard = Field(..., description="The card after the review")
    grade: int = Field(..., description="Grade applied, on the 0-5 scale")
    grade_label: str = Field(..., description="Meaning of the applied grade")
    cram: bool = Field(..., description="Whether the review only counted toward cram stats")
    cram_stats: CramStats | None = Field(None, description="Cram counters after the review")
