"""ORM and snapshot mappers."""

from .deck_mapper import DeckMapper
from .flashcard_mapper import FlashcardMapper

__all__ = ["DeckMapper", "FlashcardMapper"]
