"""Use case for reading decks."""

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.use_cases.lookups import deck_id_of
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.exceptions import DeckNotFoundError


class GetDecksUseCase:
    """Use case for reading decks."""

    def __init__(self, deck_repository: DeckRepositoryProtocol) -> None:
        self.deck_repository = deck_repository

    def list_decks(self) -> list[Deck]:
        return self.deck_repository.find_all()

    def get_deck(self, deck_id: str) -> Deck:
        """
        Get one deck.

        Raises:
            DeckNotFoundError: If the deck is not found
        """
        deck = self.deck_repository.find_by_id(deck_id_of(deck_id))
        if not deck:
            raise DeckNotFoundError(deck_id)
        return deck
