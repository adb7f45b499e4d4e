"""Use case for reading flashcards."""

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.lookups import deck_id_of, flashcard_id_of
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.exceptions import DeckNotFoundError, FlashcardNotFoundError


class GetFlashcardsUseCase:
    """Use case for reading flashcards."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository

    def list_flashcards(self, deck_id: str | None = None) -> list[Flashcard]:
        """
        Get flashcards in collection order, optionally limited to one deck.

        Raises:
            DeckNotFoundError: If a deck id is given and not found
        """
        if deck_id is None:
            return self.flashcard_repository.find_all()

        deck_id_vo = deck_id_of(deck_id)
        if not self.deck_repository.find_by_id(deck_id_vo):
            raise DeckNotFoundError(deck_id)
        return self.flashcard_repository.find_by_deck(deck_id_vo)

    def get_flashcard(self, flashcard_id: str) -> Flashcard:
        flashcard = self.flashcard_repository.find_by_id(flashcard_id_of(flashcard_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard
