"""Pydantic schema for cram session counters."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.domain.learning.entities import CramSessionStats


class CramStats(BaseModel):
    """Schema for cram session counters."""

    cards_reviewed: int
    correct_answers: int
    session_start_time: datetime
    total_cards: int
    unique_cards_reviewed: int
    accuracy_rate: int = Field(..., description="Percent of cram answers graded >= 3")
    completion_rate: int = Field(..., description="Percent of the deck touched this session")
    is_complete: bool

    @classmethod
    def from_domain(cls, stats: CramSessionStats) -> "CramStats":
        return cls(
            cards_reviewed=stats.cards_reviewed,
            correct_answers=stats.correct_answers,
            session_start_time=stats.session_start_time,
            total_cards=stats.total_cards,
            unique_cards_reviewed=stats.unique_cards_reviewed,
            accuracy_rate=stats.accuracy_rate,
            completion_rate=stats.completion_rate,
            is_complete=stats.is_complete,
        )
