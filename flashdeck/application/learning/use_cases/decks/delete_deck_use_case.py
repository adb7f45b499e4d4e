"""Use case for deleting decks together with their cards."""

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.application.learning.use_cases.lookups import deck_id_of
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.exceptions import DeckNotFoundError

logger = structlog.get_logger(__name__)


class DeleteDeckUseCase:
    """Use case for deleting decks."""

    def __init__(
        self,
        state: LibraryState,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        sync_queue: SyncQueueProtocol,
    ) -> None:
        self.state = state
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.sync_queue = sync_queue

    def delete_deck(self, deck_id: str) -> int:
        """
        Delete a deck and exactly the cards whose deck id matches.

        If the deck was selected, selection falls back to the first
        remaining deck (or none) and the current card index resets.

        Args:
            deck_id: ID of the deck to delete

        Returns:
            Number of cards removed along with the deck

        Raises:
            DeckNotFoundError: If the deck is not found
        """
        deck_id_vo = deck_id_of(deck_id)

        with self.state.lock:
            if not self.deck_repository.delete(deck_id_vo):
                raise DeckNotFoundError(deck_id)
            removed = self.flashcard_repository.delete_by_deck(deck_id_vo)

            if self.state.selected_deck_id == deck_id_vo:
                remaining = self.deck_repository.find_all()
                self.state.selected_deck_id = remaining[0].id if remaining else None
                self.state.session.current_card_index = 0

        self.sync_queue.delete_deck(deck_id)
        for card in removed:
            self.sync_queue.delete_card(card.id.value)

        logger.info("deleted_deck", deck_id=deck_id, removed_cards=len(removed))
        return len(removed)
