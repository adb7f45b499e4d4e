"""Repository for Deck domain entities."""

from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.learning.entities import Deck, LibraryState


class DeckRepository:
    """Repository for Deck domain entities held in the library state."""

    def __init__(self, state: LibraryState) -> None:
        self.state = state

    def find_by_id(self, deck_id: DeckId) -> Deck | None:
        return self.state.decks.get(deck_id)

    def find_all(self) -> list[Deck]:
        return self.state.deck_list()

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Args:
            deck: The deck entity to save

        Returns:
            The stored deck entity
        """
        with self.state.lock:
            self.state.decks[deck.id] = deck
        return deck

    def delete(self, deck_id: DeckId) -> bool:
        with self.state.lock:
            return self.state.decks.pop(deck_id, None) is not None
