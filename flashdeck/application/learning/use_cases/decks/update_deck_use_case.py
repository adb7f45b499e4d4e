"""Use case for updating deck metadata."""

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.application.learning.use_cases.lookups import deck_id_of
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.exceptions import DeckNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class UpdateDeckUseCase:
    """Use case for updating deck metadata."""

    def __init__(
        self,
        state: LibraryState,
        deck_repository: DeckRepositoryProtocol,
        sync_queue: SyncQueueProtocol,
    ) -> None:
        self.state = state
        self.deck_repository = deck_repository
        self.sync_queue = sync_queue

    def update_deck(
        self,
        deck_id: str,
        name: str | None = None,
        description: str | None = None,
        color: str | None = None,
    ) -> Deck:
        """
        Update a deck's name, description and/or color.

        Cards and scheduling are untouched.

        Raises:
            DeckNotFoundError: If the deck is not found
            ValidationError: If nothing to update is given or the name is blank
        """
        if name is None and description is None and color is None:
            raise ValidationError("At least one of name, description or color must be provided")
        if name is not None and not name.strip():
            raise ValidationError("Deck name cannot be empty")

        with self.state.lock:
            deck = self.deck_repository.find_by_id(deck_id_of(deck_id))
            if not deck:
                raise DeckNotFoundError(deck_id)
            deck.update_details(name=name, description=description, color=color)
            deck = self.deck_repository.save(deck)

        self.sync_queue.upsert_deck(deck)
        logger.info("updated_deck", deck_id=deck_id)
        return deck
