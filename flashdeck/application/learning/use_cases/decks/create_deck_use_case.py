"""Use case for creating decks."""

import random
from collections.abc import Sequence

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.domain.common.clock import Clock, utc_now
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class CreateDeckUseCase:
    """Use case for creating decks."""

    def __init__(
        self,
        state: LibraryState,
        deck_repository: DeckRepositoryProtocol,
        sync_queue: SyncQueueProtocol,
        palette: Sequence[str],
        rng: random.Random | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize use case with the library state and its collaborators."""
        self.state = state
        self.deck_repository = deck_repository
        self.sync_queue = sync_queue
        self.palette = palette
        self.rng = rng or random.Random()
        self.clock = clock

    def create_deck(self, name: str, description: str | None = None) -> Deck:
        """
        Create a new deck with a color picked from the palette.

        The new deck becomes the selected deck when nothing is selected.

        Args:
            name: Deck name, trimmed
            description: Optional description

        Returns:
            Created deck domain entity

        Raises:
            ValidationError: If the name is empty after trimming
        """
        if not name or not name.strip():
            raise ValidationError("Deck name cannot be empty")

        deck = Deck.create(
            name=name,
            description=description,
            color=self.rng.choice(list(self.palette)),
            now=self.clock(),
        )

        with self.state.lock:
            deck = self.deck_repository.save(deck)
            if self.state.selected_deck is None:
                self.state.selected_deck_id = deck.id

        self.sync_queue.upsert_deck(deck)
        logger.info("created_deck", deck_id=deck.id.value, color=deck.color)
        return deck
