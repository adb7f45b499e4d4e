"""Common value objects shared across all domain modules."""

from .ids import DeckId, FlashcardId

__all__ = [
    "DeckId",
    "FlashcardId",
]
