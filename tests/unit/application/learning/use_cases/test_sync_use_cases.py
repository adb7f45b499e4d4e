"""Tests for pulling the record store into the library."""

from datetime import timedelta

import pytest
from factories import NOW, RecordingSyncQueue, make_card, make_deck

from flashdeck.application.learning.use_cases.dtos import SyncStatus
from flashdeck.application.learning.use_cases.sync import SyncLibraryUseCase
from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.exceptions import SyncError
from flashdeck.infrastructure.learning.repositories import DeckRepository, FlashcardRepository
from flashdeck.infrastructure.learning.store import SqlAlchemyRecordStore
from flashdeck.infrastructure.learning.sync import SyncOutbox

OWNER = "owner-1"


class BrokenStore:
    async def get_decks(self, owner_id: str) -> list:
        raise SyncError("get_decks", "connection refused")


class RejectingWritesStore:
    """Reads from a real store and refuses every write."""

    def __init__(self, inner: SqlAlchemyRecordStore) -> None:
        self.inner = inner

    async def get_decks(self, owner_id: str) -> list:
        return await self.inner.get_decks(owner_id)

    async def get_cards(self, owner_id: str, deck_id: str | None = None) -> list:
        return await self.inner.get_cards(owner_id, deck_id)

    async def upsert_card(self, owner_id: str, card: object) -> None:
        raise SyncError("upsert_card", "read-only replica")

    async def sync_all(self, owner_id: str, decks: object, cards: object) -> None:
        raise SyncError("sync_all", "read-only replica")


async def _publish(store: SqlAlchemyRecordStore, state: LibraryState) -> None:
    for deck in state.deck_list():
        await store.upsert_deck(OWNER, deck)
    for card in state.card_list():
        await store.upsert_card(OWNER, card)


def _pull(
    state: LibraryState, store: object, sync_queue: object, status: SyncStatus
) -> SyncLibraryUseCase:
    return SyncLibraryUseCase(
        state,
        DeckRepository(state),
        FlashcardRepository(state),
        store,  # type: ignore[arg-type]
        sync_queue,  # type: ignore[arg-type]
        status,
        OWNER,
        clock=lambda: NOW,
    )


@pytest.mark.asyncio
async def test_remote_records_win_by_id(
    state: LibraryState, record_store: SqlAlchemyRecordStore, sync_queue: RecordingSyncQueue
) -> None:
    await record_store.upsert_deck(OWNER, make_deck("deck-2", "Spanish B1"))
    await record_store.upsert_deck(OWNER, make_deck("deck-9", "Remote only"))
    await record_store.upsert_card(
        OWNER, make_card("card-3", "deck-2", "Hola", repetition=2, interval=6.0)
    )
    status = SyncStatus()

    decks, cards = await _pull(state, record_store, sync_queue, status).pull()

    assert (decks, cards) == (3, 3)
    assert state.decks[DeckId("deck-2")].name == "Spanish B1"
    assert state.decks[DeckId("deck-1")].name == "General"
    assert state.flashcards[FlashcardId("card-3")].repetition == 2
    assert state.selected_deck_id == DeckId("deck-1")
    assert status.last_sync == NOW
    assert not status.is_syncing
    assert sync_queue.operations == [("sync_all", (3, 3))]


@pytest.mark.asyncio
async def test_other_owners_are_ignored(
    state: LibraryState, record_store: SqlAlchemyRecordStore, sync_queue: RecordingSyncQueue
) -> None:
    await record_store.upsert_deck("someone-else", make_deck("deck-7", "Theirs"))

    await _pull(state, record_store, sync_queue, SyncStatus()).pull()

    assert DeckId("deck-7") not in state.decks


@pytest.mark.asyncio
async def test_selection_moves_when_selected_deck_is_gone(
    record_store: SqlAlchemyRecordStore, sync_queue: RecordingSyncQueue
) -> None:
    state = LibraryState(selected_deck_id=DeckId("deck-x"))
    state.session.current_card_index = 3
    await record_store.upsert_deck(OWNER, make_deck("deck-5", "Remote"))
    await record_store.upsert_card(
        OWNER, make_card("card-5", "deck-5", next_review=NOW + timedelta(days=1))
    )

    await _pull(state, record_store, sync_queue, SyncStatus()).pull()

    assert state.selected_deck_id == DeckId("deck-5")
    assert state.session.current_card_index == 0


@pytest.mark.asyncio
async def test_store_failure_leaves_state_untouched(
    state: LibraryState, sync_queue: RecordingSyncQueue
) -> None:
    status = SyncStatus()

    with pytest.raises(SyncError):
        await _pull(state, BrokenStore(), sync_queue, status).pull()

    assert not status.is_online
    assert status.error == "Sync get_decks failed: connection refused"
    assert len(state.decks) == 2
    assert sync_queue.operations == []


@pytest.mark.asyncio
async def test_unconfirmed_local_writes_win_over_remote(
    state: LibraryState, record_store: SqlAlchemyRecordStore, sync_queue: RecordingSyncQueue
) -> None:
    await _publish(record_store, state)
    del state.decks[DeckId("deck-2")]
    del state.flashcards[FlashcardId("card-3")]
    sync_queue.delete_deck("deck-2")
    sync_queue.delete_card("card-3")
    reviewed = state.flashcards[FlashcardId("card-1")]
    reviewed.repetition = 9
    sync_queue.upsert_card(reviewed)

    decks, cards = await _pull(state, record_store, sync_queue, SyncStatus()).pull()

    assert (decks, cards) == (1, 2)
    assert list(state.decks) == [DeckId("deck-1")]
    assert FlashcardId("card-3") not in state.flashcards
    assert state.flashcards[FlashcardId("card-1")].repetition == 9
    assert sync_queue.drains == 1
    assert sync_queue.operations[-1] == ("sync_all", (1, 2))


@pytest.mark.asyncio
async def test_remote_cards_of_a_locally_deleted_deck_are_dropped(
    state: LibraryState, record_store: SqlAlchemyRecordStore, sync_queue: RecordingSyncQueue
) -> None:
    await _publish(record_store, state)
    await record_store.upsert_card(OWNER, make_card("card-8", "deck-2", "Adios"))
    del state.decks[DeckId("deck-2")]
    del state.flashcards[FlashcardId("card-3")]
    sync_queue.delete_deck("deck-2")
    sync_queue.delete_card("card-3")

    await _pull(state, record_store, sync_queue, SyncStatus()).pull()

    assert FlashcardId("card-8") not in state.flashcards
    assert all(card.deck_id == DeckId("deck-1") for card in state.card_list())


@pytest.mark.asyncio
async def test_pull_waits_for_queued_writes(
    state: LibraryState, record_store: SqlAlchemyRecordStore
) -> None:
    await _publish(record_store, state)
    status = SyncStatus()
    outbox = SyncOutbox(record_store, OWNER, status, retry_delay=0.0, clock=lambda: NOW)
    await outbox.start()
    del state.decks[DeckId("deck-2")]
    del state.flashcards[FlashcardId("card-3")]
    outbox.delete_deck("deck-2")
    outbox.delete_card("card-3")

    try:
        await _pull(state, record_store, outbox, status).pull()
    finally:
        await outbox.stop()

    assert list(state.decks) == [DeckId("deck-1")]
    assert [d.id.value for d in await record_store.get_decks(OWNER)] == ["deck-1"]
    assert outbox.unsynced_ids() == (set(), set())


@pytest.mark.asyncio
async def test_dropped_local_write_is_not_overwritten(
    state: LibraryState, record_store: SqlAlchemyRecordStore
) -> None:
    await _publish(record_store, state)
    store = RejectingWritesStore(record_store)
    status = SyncStatus()
    outbox = SyncOutbox(
        store,  # type: ignore[arg-type]
        OWNER,
        status,
        max_retries=0,
        retry_delay=0.0,
        clock=lambda: NOW,
    )
    await outbox.start()
    reviewed = state.flashcards[FlashcardId("card-1")]
    reviewed.repetition = 9
    outbox.upsert_card(reviewed)

    try:
        await _pull(state, store, outbox, status).pull()
    finally:
        await outbox.stop()

    assert state.flashcards[FlashcardId("card-1")].repetition == 9
    assert "card-1" in outbox.unsynced_ids()[1]
