"""Use case driving deck selection, cram mode and card navigation."""

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.dtos import StudySnapshot
from flashdeck.application.learning.use_cases.lookups import deck_id_of
from flashdeck.domain.common.clock import Clock, utc_now
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.learning.entities import Flashcard, LibraryState
from flashdeck.domain.learning.services import due_set_selector
from flashdeck.exceptions import DeckNotFoundError

logger = structlog.get_logger(__name__)


class StudySessionUseCase:
    """
    Navigation over the current review set.

    The review set is recomputed from the clock on every call, so a card
    that becomes due between two calls shows up on the second.
    """

    def __init__(
        self,
        state: LibraryState,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        clock: Clock = utc_now,
    ) -> None:
        self.state = state
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.clock = clock

    def _review_set(self) -> list[Flashcard]:
        return due_set_selector.review_set(
            self.flashcard_repository.find_all(),
            self.state.selected_deck_id,
            self.state.session.cram_mode,
            self.clock(),
        )

    def _deck_size(self, deck_id: DeckId) -> int:
        return len(self.flashcard_repository.find_by_deck(deck_id))

    def select_deck(self, deck_id: str) -> StudySnapshot:
        """
        Make a deck the study target and restart navigation.

        Raises:
            DeckNotFoundError: If the deck is not found
        """
        deck_id_vo = deck_id_of(deck_id)
        with self.state.lock:
            if not self.deck_repository.find_by_id(deck_id_vo):
                raise DeckNotFoundError(deck_id)
            self.state.selected_deck_id = deck_id_vo
            session = self.state.session
            session.current_card_index = 0
            if session.cram_mode:
                session.reset_cram_stats(self._deck_size(deck_id_vo), self.clock())
            logger.info("selected_deck", deck_id=deck_id, cram_mode=session.cram_mode)
            return self.snapshot()

    def toggle_cram_mode(self) -> StudySnapshot:
        with self.state.lock:
            session = self.state.session
            session.cram_mode = not session.cram_mode
            session.current_card_index = 0
            if session.cram_mode and self.state.selected_deck_id is not None:
                session.reset_cram_stats(
                    self._deck_size(self.state.selected_deck_id), self.clock()
                )
            logger.info("toggled_cram_mode", cram_mode=session.cram_mode)
            return self.snapshot()

    def reset_cram_session(self) -> StudySnapshot:
        """Clear cram counters for the selected deck. No-op without a selection."""
        with self.state.lock:
            if self.state.selected_deck_id is not None:
                self.state.session.reset_cram_stats(
                    self._deck_size(self.state.selected_deck_id), self.clock()
                )
                self.state.session.current_card_index = 0
            return self.snapshot()

    def next_card(self) -> StudySnapshot:
        with self.state.lock:
            session = self.state.session
            session.current_card_index = due_set_selector.next_index(
                session.current_card_index, len(self._review_set())
            )
            return self.snapshot()

    def previous_card(self) -> StudySnapshot:
        with self.state.lock:
            session = self.state.session
            session.current_card_index = due_set_selector.previous_index(
                session.current_card_index, len(self._review_set())
            )
            return self.snapshot()

    def current_card(self) -> Flashcard | None:
        return due_set_selector.card_at(
            self._review_set(), self.state.session.current_card_index
        )

    def snapshot(self) -> StudySnapshot:
        with self.state.lock:
            cards = self._review_set()
            session = self.state.session
            return StudySnapshot(
                selected_deck=self.state.selected_deck,
                current_card=due_set_selector.card_at(cards, session.current_card_index),
                current_card_index=session.current_card_index,
                review_set_size=len(cards),
                cram_mode=session.cram_mode,
                cram_stats=session.cram_stats,
            )
