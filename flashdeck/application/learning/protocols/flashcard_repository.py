"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations."""

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...

    def find_all(self) -> list[Flashcard]:
        """Get every flashcard in collection order."""
        ...

    def find_by_deck(self, deck_id: DeckId) -> list[Flashcard]:
        """
        Get all flashcards for a deck.

        Args:
            deck_id: The deck ID

        Returns:
            List of flashcard entities in collection order
        """
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """Save a flashcard entity (create or update)."""
        ...

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...

    def delete_by_deck(self, deck_id: DeckId) -> list[Flashcard]:
        """
        Delete every flashcard of a deck.

        Returns:
            The removed flashcards
        """
        ...
