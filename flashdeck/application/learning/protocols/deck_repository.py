"""Protocol for Deck repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.learning.entities.deck import Deck


class DeckRepositoryProtocol(Protocol):
    """Protocol for Deck repository operations."""

    def find_by_id(self, deck_id: DeckId) -> Deck | None:
        """
        Find a deck by ID.

        Args:
            deck_id: The deck ID

        Returns:
            Deck entity if found, None otherwise
        """
        ...

    def find_all(self) -> list[Deck]:
        """
        Get every deck.

        Returns:
            List of deck entities in collection order
        """
        ...

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        New decks are appended to the collection; existing ones keep
        their position.
        """
        ...

    def delete(self, deck_id: DeckId) -> bool:
        """
        Delete a deck. Cards are not touched.

        Returns:
            True if deleted, False if not found
        """
        ...
