"""Repository for Flashcard domain entities."""

from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import Flashcard, LibraryState


class FlashcardRepository:
    """Repository for Flashcard domain entities held in the library state."""

    def __init__(self, state: LibraryState) -> None:
        self.state = state

    def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        return self.state.flashcards.get(flashcard_id)

    def find_all(self) -> list[Flashcard]:
        return self.state.card_list()

    def find_by_deck(self, deck_id: DeckId) -> list[Flashcard]:
        """
        Get all flashcards for a deck.

        Args:
            deck_id: The deck ID

        Returns:
            List of flashcard entities in collection order
        """
        return [card for card in self.state.card_list() if card.belongs_to_deck(deck_id)]

    def save(self, flashcard: Flashcard) -> Flashcard:
        with self.state.lock:
            self.state.flashcards[flashcard.id] = flashcard
        return flashcard

    def delete(self, flashcard_id: FlashcardId) -> bool:
        with self.state.lock:
            return self.state.flashcards.pop(flashcard_id, None) is not None

    def delete_by_deck(self, deck_id: DeckId) -> list[Flashcard]:
        """
        Delete every flashcard of a deck.

        Returns:
            The removed flashcards, in collection order
        """
        with self.state.lock:
            removed = self.find_by_deck(deck_id)
            for card in removed:
                del self.state.flashcards[card.id]
        return removed
