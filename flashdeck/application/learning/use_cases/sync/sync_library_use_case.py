"""Use case pulling the external record store into the local library."""

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.record_store import RecordStoreProtocol
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.application.learning.use_cases.dtos import SyncStatus
from flashdeck.domain.common.clock import Clock, utc_now
from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import Deck, Flashcard, LibraryState
from flashdeck.exceptions import SyncError

logger = structlog.get_logger(__name__)


class SyncLibraryUseCase:
    """
    Merge remote records into local state.

    Records are matched by id and the remote copy wins whole, except for
    records with local writes the store has not confirmed yet: those keep
    their local version, and a locally deleted one stays deleted. Local-only
    records are kept. The merged collection is then pushed back so both
    sides agree.
    """

    def __init__(
        self,
        state: LibraryState,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        record_store: RecordStoreProtocol,
        sync_queue: SyncQueueProtocol,
        sync_status: SyncStatus,
        owner_id: str,
        clock: Clock = utc_now,
    ) -> None:
        self.state = state
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.record_store = record_store
        self.sync_queue = sync_queue
        self.sync_status = sync_status
        self.owner_id = owner_id
        self.clock = clock

    async def pull(self) -> tuple[int, int]:
        """
        Fetch everything from the store and merge it in.

        The selected deck is kept when it survives the merge; otherwise
        selection moves to the first deck and the session restarts.

        Returns:
            Tuple of (deck count, card count) after the merge

        Raises:
            SyncError: If the store cannot be read; local state is unchanged
        """
        await self.sync_queue.drain()
        self.sync_status.mark_syncing()
        try:
            remote_decks = await self.record_store.get_decks(self.owner_id)
            remote_cards = await self.record_store.get_cards(self.owner_id)
        except SyncError as e:
            self.sync_status.mark_failed(e.message)
            logger.warning("sync_pull_failed", owner_id=self.owner_id, error=e.message)
            raise

        local_decks, local_cards = self.sync_queue.unsynced_ids()
        with self.state.lock:
            decks: dict[DeckId, Deck] = {d.id: d for d in self.deck_repository.find_all()}
            decks.update((d.id, d) for d in remote_decks if d.id.value not in local_decks)
            cards: dict[FlashcardId, Flashcard] = {
                c.id: c for c in self.flashcard_repository.find_all()
            }
            cards.update((c.id, c) for c in remote_cards if c.id.value not in local_cards)
            # Remote cards can point at a deck deleted here
            cards = {card_id: c for card_id, c in cards.items() if c.deck_id in decks}

            selected = self.state.selected_deck_id
            if selected is not None and selected in decks:
                self.state.decks = decks
                self.state.flashcards = cards
            else:
                self.state.replace_collection(decks.values(), cards.values())

        self.sync_status.mark_synced(self.clock())
        self.sync_queue.sync_all(list(decks.values()), list(cards.values()))
        logger.info(
            "sync_pulled",
            owner_id=self.owner_id,
            remote_decks=len(remote_decks),
            remote_cards=len(remote_cards),
        )
        return len(decks), len(cards)
