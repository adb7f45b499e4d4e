"""Tests for deck use cases."""

import random

import pytest
from factories import NOW, RecordingSyncQueue

from flashdeck.application.learning.use_cases.decks import (
    CreateDeckUseCase,
    DeleteDeckUseCase,
    UpdateDeckUseCase,
)
from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.exceptions import DeckNotFoundError, ValidationError
from flashdeck.infrastructure.learning.repositories import DeckRepository, FlashcardRepository

PALETTE = ["bg-blue-500", "bg-green-500", "bg-red-500"]


class TestCreateDeck:
    def _use_case(
        self, state: LibraryState, sync_queue: RecordingSyncQueue, seed: int = 7
    ) -> CreateDeckUseCase:
        return CreateDeckUseCase(
            state,
            DeckRepository(state),
            sync_queue,
            palette=PALETTE,
            rng=random.Random(seed),
            clock=lambda: NOW,
        )

    def test_creates_deck_with_palette_color(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        deck = self._use_case(state, sync_queue).create_deck("  Kanji ", "Joyo list")

        assert deck.name == "Kanji"
        assert deck.description == "Joyo list"
        assert deck.color in PALETTE
        assert deck.created_at == NOW
        assert state.decks[deck.id] is deck
        assert list(state.decks)[-1] == deck.id
        assert sync_queue.operations == [("upsert_deck", deck.id.value)]

    def test_color_choice_follows_rng(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        expected = random.Random(3).choice(PALETTE)
        assert self._use_case(state, sync_queue, seed=3).create_deck("A").color == expected

    def test_ids_are_unique(self, state: LibraryState, sync_queue: RecordingSyncQueue) -> None:
        use_case = self._use_case(state, sync_queue)
        assert use_case.create_deck("A").id != use_case.create_deck("A").id

    def test_selects_first_deck(self, sync_queue: RecordingSyncQueue) -> None:
        state = LibraryState()
        deck = self._use_case(state, sync_queue).create_deck("First")
        assert state.selected_deck_id == deck.id

    def test_keeps_existing_selection(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        self._use_case(state, sync_queue).create_deck("Another")
        assert state.selected_deck_id == DeckId("deck-1")

    def test_rejects_blank_name(self, state: LibraryState, sync_queue: RecordingSyncQueue) -> None:
        with pytest.raises(ValidationError):
            self._use_case(state, sync_queue).create_deck("   ")
        assert len(state.decks) == 2
        assert sync_queue.operations == []


class TestUpdateDeck:
    def test_updates_metadata_only(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        use_case = UpdateDeckUseCase(state, DeckRepository(state), sync_queue)
        deck = use_case.update_deck("deck-1", name=" Renamed ", color="bg-red-500")

        assert deck.name == "Renamed"
        assert deck.color == "bg-red-500"
        assert deck.description is None
        assert len(state.flashcards) == 3
        assert sync_queue.operations == [("upsert_deck", "deck-1")]

    def test_missing_deck(self, state: LibraryState, sync_queue: RecordingSyncQueue) -> None:
        use_case = UpdateDeckUseCase(state, DeckRepository(state), sync_queue)
        with pytest.raises(DeckNotFoundError):
            use_case.update_deck("nope", name="X")

    def test_requires_a_field(self, state: LibraryState, sync_queue: RecordingSyncQueue) -> None:
        use_case = UpdateDeckUseCase(state, DeckRepository(state), sync_queue)
        with pytest.raises(ValidationError):
            use_case.update_deck("deck-1")


class TestDeleteDeck:
    def _use_case(self, state: LibraryState, sync_queue: RecordingSyncQueue) -> DeleteDeckUseCase:
        return DeleteDeckUseCase(
            state, DeckRepository(state), FlashcardRepository(state), sync_queue
        )

    def test_cascades_to_exactly_its_cards(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        removed = self._use_case(state, sync_queue).delete_deck("deck-1")

        assert removed == 2
        assert DeckId("deck-1") not in state.decks
        assert list(state.flashcards) == [FlashcardId("card-3")]
        assert sync_queue.operations == [
            ("delete_deck", "deck-1"),
            ("delete_card", "card-1"),
            ("delete_card", "card-2"),
        ]

    def test_selection_falls_back_to_first_remaining(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        state.session.current_card_index = 3
        self._use_case(state, sync_queue).delete_deck("deck-1")
        assert state.selected_deck_id == DeckId("deck-2")
        assert state.session.current_card_index == 0

    def test_selection_falls_back_to_none(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        use_case = self._use_case(state, sync_queue)
        use_case.delete_deck("deck-1")
        use_case.delete_deck("deck-2")
        assert state.selected_deck_id is None
        assert state.flashcards == {}

    def test_unselected_deck_keeps_selection(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        self._use_case(state, sync_queue).delete_deck("deck-2")
        assert state.selected_deck_id == DeckId("deck-1")
        assert len(state.flashcards) == 2

    def test_missing_deck_changes_nothing(
        self, state: LibraryState, sync_queue: RecordingSyncQueue
    ) -> None:
        with pytest.raises(DeckNotFoundError):
            self._use_case(state, sync_queue).delete_deck("nope")
        assert len(state.decks) == 2
        assert len(state.flashcards) == 3
        assert sync_queue.operations == []
