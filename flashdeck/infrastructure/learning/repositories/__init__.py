"""In-memory repositories over the library state."""

from .deck_repository import DeckRepository
from .flashcard_repository import FlashcardRepository

__all__ = ["DeckRepository", "FlashcardRepository"]
