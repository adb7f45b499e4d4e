"""Tests for exporting and importing bundles."""

import asyncio
from datetime import timedelta

import pytest
from factories import NOW, RecordingSyncQueue, bundle, bundle_card, bundle_deck, make_deck

from flashdeck.application.learning.services import BundleProcessor, BundleValidator
from flashdeck.application.learning.use_cases.dtos import ImportStatus
from flashdeck.application.learning.use_cases.transfer import (
    ExportBundleUseCase,
    ImportBundleUseCase,
)
from flashdeck.application.learning.use_cases.transfer.export_bundle_use_case import (
    export_filename,
)
from flashdeck.domain.common.clock import utc_now
from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import Deck, Flashcard, LibraryState
from flashdeck.domain.learning.services import (
    ConflictRecord,
    ConflictResolver,
    ImportStrategy,
    Sm2Scheduler,
)
from flashdeck.domain.learning.value_objects import Grade
from flashdeck.exceptions import BundleFetchError, DeckNotFoundError, ImportValidationError
from flashdeck.infrastructure.learning.repositories import DeckRepository, FlashcardRepository


class StaticFetcher:
    def __init__(self, payload: object = None, delay: float = 0.0) -> None:
        self.payload = payload
        self.delay = delay
        self.urls: list[str] = []

    async def fetch(self, url: str) -> object:
        self.urls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.payload


class FailingFetcher:
    async def fetch(self, url: str) -> object:
        raise BundleFetchError(url, "HTTP 404: Not Found")


class ExplodingProcessor:
    def to_entities(self, payload: object) -> tuple[list, list]:
        raise RuntimeError("boom")


def _export(state: LibraryState) -> ExportBundleUseCase:
    return ExportBundleUseCase(DeckRepository(state), FlashcardRepository(state), clock=lambda: NOW)


def _import(
    state: LibraryState, sync_queue: RecordingSyncQueue, fetcher: object = None
) -> ImportBundleUseCase:
    return ImportBundleUseCase(
        state,
        DeckRepository(state),
        FlashcardRepository(state),
        sync_queue,
        fetcher or StaticFetcher(),  # type: ignore[arg-type]
        BundleValidator(),
        BundleProcessor(),
        ConflictResolver(),
        fetch_timeout=5.0,
    )


class TestExport:
    def test_whole_collection(self, state: LibraryState) -> None:
        document, filename = _export(state).export_bundle()

        assert filename == "flashcards-all-2024-05-01.json"
        assert document["version"] == "1.0"
        assert document["exportDate"] == "2024-05-01T12:00:00.000Z"
        assert [d["id"] for d in document["decks"]] == ["deck-1", "deck-2"]
        assert len(document["flashcards"]) == 3

    def test_single_deck(self, state: LibraryState) -> None:
        document, filename = _export(state).export_bundle("deck-1")

        assert filename == "flashcards-general-2024-05-01.json"
        assert [d["name"] for d in document["decks"]] == ["General"]
        assert {c["deckId"] for c in document["flashcards"]} == {"deck-1"}

    def test_record_layout(self, state: LibraryState) -> None:
        document, _ = _export(state).export_bundle("deck-2")

        deck = document["decks"][0]
        assert "description" not in deck
        assert deck["createdAt"] == "2024-04-21T12:00:00.000Z"
        card = document["flashcards"][0]
        assert card["nextReview"] == "2024-05-01T11:59:00.000Z"
        assert "lastReviewed" not in card
        assert "frontLanguage" not in card
        assert (card["interval"], card["repetition"], card["efactor"]) == (1.0, 0, 2.5)

    def test_missing_deck(self, state: LibraryState) -> None:
        with pytest.raises(DeckNotFoundError):
            _export(state).export_bundle("nope")

    def test_filename_slug(self) -> None:
        deck = make_deck(name="Spanish  Verbs Deck")
        assert export_filename(deck, NOW) == "flashcards-spanish-verbs-deck-2024-05-01.json"


class TestImport:
    def test_round_trip_into_empty_library(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        deck = Deck.create("Live", "bg-green-500", description="Made just now")
        state.decks[deck.id] = deck
        card = Flashcard.create(deck.id, "Front", "Back", front_language="en", back_language="fr")
        card.apply_review(
            Sm2Scheduler().schedule(card.memory_state, Grade.CORRECT_HARD), utc_now()
        )
        state.flashcards[card.id] = card
        reviewed = state.flashcards[FlashcardId("card-2")]
        reviewed.last_reviewed = NOW - timedelta(hours=2)
        document, _ = _export(state).export_bundle()
        target = LibraryState()

        outcome = _import(target, sync_queue).import_payload(document, ImportStrategy.RENAME)

        assert outcome.status is ImportStatus.SUCCESS
        assert outcome.imported_decks == 3
        assert outcome.imported_cards == 4
        assert outcome.conflicts == []
        assert list(target.decks) == list(state.decks)
        for deck_id, original_deck in state.decks.items():
            copy_deck = target.decks[deck_id]
            assert (
                copy_deck.name,
                copy_deck.description,
                copy_deck.color,
                copy_deck.created_at,
            ) == (
                original_deck.name,
                original_deck.description,
                original_deck.color,
                original_deck.created_at,
            )
        assert list(target.flashcards) == list(state.flashcards)
        for card_id, original in state.flashcards.items():
            copy = target.flashcards[card_id]
            assert (
                copy.deck_id,
                copy.front,
                copy.back,
                copy.front_language,
                copy.back_language,
                copy.created_at,
                copy.last_reviewed,
                copy.next_review,
                copy.interval,
                copy.repetition,
                copy.efactor,
            ) == (
                original.deck_id,
                original.front,
                original.back,
                original.front_language,
                original.back_language,
                original.created_at,
                original.last_reviewed,
                original.next_review,
                original.interval,
                original.repetition,
                original.efactor,
            )
        assert target.selected_deck_id == DeckId("deck-1")
        assert sync_queue.operations == [("sync_all", (3, 4))]

    def test_rename_on_deck_name_clash(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        payload = bundle(decks=[bundle_deck("d1", "General")], cards=[bundle_card("c1", "d1")])

        outcome = _import(state, sync_queue).import_payload(payload, ImportStrategy.RENAME)

        names = [deck.name for deck in state.deck_list()]
        assert names == ["General", "Spanish", "General (Imported)"]
        assert outcome.conflicts == [
            ConflictRecord("deck", "General", 'renamed to "General (Imported)"')
        ]
        imported = state.deck_list()[-1]
        assert [c.front for c in state.card_list() if c.deck_id == imported.id] == ["Question"]
        assert len(state.flashcards) == 4

    def test_skip_merges_cards_into_existing_deck(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        payload = bundle(
            decks=[bundle_deck("d1", "General")],
            cards=[bundle_card("c1", "d1", "Q1"), bundle_card("c2", "d1", "Fresh")],
        )

        outcome = _import(state, sync_queue).import_payload(payload, ImportStrategy.SKIP)

        assert outcome.imported_decks == 0
        assert outcome.imported_cards == 1
        assert [c.action for c in outcome.conflicts] == ["skipped", "skipped"]
        fronts = [c.front for c in state.card_list() if c.deck_id == DeckId("deck-1")]
        assert fronts == ["Q1", "Q2", "Fresh"]

    def test_import_resets_session(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        state.session.cram_mode = True
        state.session.current_card_index = 2
        _import(state, sync_queue).import_payload(bundle(), ImportStrategy.RENAME)
        assert not state.session.cram_mode
        assert state.session.current_card_index == 0

    def test_invalid_bundle_changes_nothing(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        use_case = _import(state, sync_queue)
        payload = bundle(cards=[bundle_card(deck_id="elsewhere")])

        with pytest.raises(ImportValidationError):
            use_case.import_payload(payload)

        assert use_case.status is ImportStatus.ERROR
        assert use_case.last_outcome.error is not None
        assert len(state.decks) == 2
        assert len(state.flashcards) == 3
        assert sync_queue.operations == []

    def test_number_too_large_for_float_is_rejected(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        use_case = _import(state, sync_queue)
        payload = bundle(cards=[bundle_card(repetition=10**400)])

        with pytest.raises(ImportValidationError) as exc_info:
            use_case.import_payload(payload)

        assert exc_info.value.field == "repetition"
        assert use_case.status is ImportStatus.ERROR
        assert len(state.flashcards) == 3

    def test_unexpected_failure_still_ends_in_error(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        use_case = _import(state, sync_queue)
        use_case.processor = ExplodingProcessor()  # type: ignore[assignment]

        with pytest.raises(RuntimeError):
            use_case.import_payload(bundle())

        assert use_case.status is ImportStatus.ERROR
        assert "boom" in (use_case.last_outcome.error or "")
        assert len(state.decks) == 2
        assert sync_queue.operations == []

    def test_status_starts_idle(self, state: LibraryState, sync_queue: RecordingSyncQueue) -> None:
        assert _import(state, sync_queue).status is ImportStatus.IDLE


class TestRemoteImport:
    @pytest.mark.asyncio
    async def test_fetches_and_imports(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        fetcher = StaticFetcher(bundle(decks=[bundle_deck("d9", "French")], cards=[]))

        outcome = await _import(state, sync_queue, fetcher).import_from_url(
            "https://example.com/french.json", ImportStrategy.SKIP
        )

        assert outcome.status is ImportStatus.SUCCESS
        assert fetcher.urls == ["https://example.com/french.json"]
        assert DeckId("d9") in state.decks

    @pytest.mark.asyncio
    async def test_timeout_leaves_collection_unchanged(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        use_case = _import(state, sync_queue, StaticFetcher(bundle(), delay=5.0))

        with pytest.raises(BundleFetchError, match="timed out"):
            await use_case.import_from_url("https://example.com/slow.json", timeout=0.01)

        assert use_case.status is ImportStatus.ERROR
        assert len(state.decks) == 2
        assert sync_queue.operations == []

    @pytest.mark.asyncio
    async def test_fetch_failure(self, state: LibraryState, sync_queue: RecordingSyncQueue) -> None:
        use_case = _import(state, sync_queue, FailingFetcher())

        with pytest.raises(BundleFetchError):
            await use_case.import_from_url("https://example.com/missing.json")

        assert use_case.status is ImportStatus.ERROR
        assert "HTTP 404" in (use_case.last_outcome.error or "")

    @pytest.mark.asyncio
    async def test_malformed_remote_bundle(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        use_case = _import(state, sync_queue, StaticFetcher({"decks": "nope"}))

        with pytest.raises(ImportValidationError):
            await use_case.import_from_url("https://example.com/bad.json")

        assert use_case.status is ImportStatus.ERROR
        assert len(state.flashcards) == 3
