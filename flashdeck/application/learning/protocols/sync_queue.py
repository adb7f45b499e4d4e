"""Protocol for queueing writes to the external record store."""

from collections.abc import Sequence
from typing import Protocol

from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard


class SyncQueueProtocol(Protocol):
    """
    Outbound queue of store operations.

    Enqueueing never blocks and never fails the caller; records are
    snapshotted at enqueue time.
    """

    def upsert_deck(self, deck: Deck) -> None: ...

    def upsert_card(self, card: Flashcard) -> None: ...

    def delete_deck(self, deck_id: str) -> None: ...

    def delete_card(self, card_id: str) -> None: ...

    def sync_all(self, decks: Sequence[Deck], cards: Sequence[Flashcard]) -> None: ...

    async def drain(self) -> None:
        """Wait until every queued operation has been attempted."""
        ...

    def unsynced_ids(self) -> tuple[set[str], set[str]]:
        """Deck and card ids whose latest local write the store has not confirmed."""
        ...
