"""Protocol for the external record store the library syncs to."""

from typing import Protocol

from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard


class RecordStoreProtocol(Protocol):
    """
    Asynchronous key-value store of deck and card records.

    Every call may fail independently. Callers treat each one as
    fire-and-forget and log failures rather than rolling back.
    """

    async def get_decks(self, owner_id: str) -> list[Deck]: ...

    async def get_cards(self, owner_id: str, deck_id: str | None = None) -> list[Flashcard]: ...

    async def upsert_deck(self, owner_id: str, deck: Deck) -> None: ...

    async def upsert_card(self, owner_id: str, card: Flashcard) -> None: ...

    async def delete_deck(self, owner_id: str, deck_id: str) -> None:
        """Delete a deck record and the card records that belong to it."""
        ...

    async def delete_card(self, owner_id: str, card_id: str) -> None: ...

    async def sync_all(self, owner_id: str, decks: list[Deck], cards: list[Flashcard]) -> None:
        """Upsert both lists in one go."""
        ...
