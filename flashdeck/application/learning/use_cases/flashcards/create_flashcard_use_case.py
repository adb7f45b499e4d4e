"""Use case for creating flashcards."""

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.application.learning.use_cases.lookups import deck_id_of
from flashdeck.domain.common.clock import Clock, utc_now
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.exceptions import DeckNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class CreateFlashcardUseCase:
    """Use case for creating flashcards."""

    def __init__(
        self,
        state: LibraryState,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        sync_queue: SyncQueueProtocol,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize use case with the library state and its collaborators."""
        self.state = state
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.sync_queue = sync_queue
        self.clock = clock

    def create_flashcard(
        self,
        front: str,
        back: str,
        deck_id: str | None = None,
        front_language: str | None = None,
        back_language: str | None = None,
    ) -> Flashcard:
        """
        Create a new, immediately due flashcard.

        Args:
            front: Prompt text
            back: Answer text
            deck_id: Target deck; the selected deck when omitted
            front_language: Optional language hint for the front
            back_language: Optional language hint for the back

        Returns:
            Created flashcard domain entity

        Raises:
            ValidationError: If front/back is empty or no deck is given or selected
            DeckNotFoundError: If the deck is not found
        """
        if not front or not front.strip() or not back or not back.strip():
            raise ValidationError("Front and back cannot be empty")

        with self.state.lock:
            if deck_id is None:
                if self.state.selected_deck_id is None:
                    raise ValidationError("No deck given and no deck selected")
                target = self.state.selected_deck_id
            else:
                target = deck_id_of(deck_id)

            if not self.deck_repository.find_by_id(target):
                raise DeckNotFoundError(target.value)

            flashcard = Flashcard.create(
                deck_id=target,
                front=front,
                back=back,
                front_language=front_language,
                back_language=back_language,
                now=self.clock(),
            )
            flashcard = self.flashcard_repository.save(flashcard)

        self.sync_queue.upsert_card(flashcard)
        logger.info(
            "created_flashcard",
            flashcard_id=flashcard.id.value,
            deck_id=flashcard.deck_id.value,
        )
        return flashcard
