"""Use case for updating flashcards."""

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.application.learning.use_cases.lookups import flashcard_id_of
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.exceptions import FlashcardNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class UpdateFlashcardUseCase:
    """Use case for updating flashcards."""

    def __init__(
        self,
        state: LibraryState,
        flashcard_repository: FlashcardRepositoryProtocol,
        sync_queue: SyncQueueProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.state = state
        self.flashcard_repository = flashcard_repository
        self.sync_queue = sync_queue

    def update_flashcard(
        self,
        flashcard_id: str,
        front: str,
        back: str,
        front_language: str | None = None,
        back_language: str | None = None,
    ) -> Flashcard:
        """
        Replace a flashcard's content and language hints.

        Scheduling fields are never changed here.

        Args:
            flashcard_id: ID of the flashcard to update
            front: New front text
            back: New back text
            front_language: New front language hint, None clears it
            back_language: New back language hint, None clears it

        Returns:
            Updated flashcard domain entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If front or back is empty
        """
        if not front or not front.strip() or not back or not back.strip():
            raise ValidationError("Front and back cannot be empty")

        with self.state.lock:
            flashcard = self.flashcard_repository.find_by_id(flashcard_id_of(flashcard_id))
            if not flashcard:
                raise FlashcardNotFoundError(flashcard_id)

            flashcard.update_content(front, back, front_language, back_language)
            flashcard = self.flashcard_repository.save(flashcard)

        self.sync_queue.upsert_card(flashcard)
        logger.info("updated_flashcard", flashcard_id=flashcard_id)
        return flashcard
