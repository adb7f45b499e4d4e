"""Use case for deleting flashcards."""

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.application.learning.use_cases.lookups import flashcard_id_of
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    """Use case for deleting flashcards."""

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

    def delete_flashcard(self, flashcard_id: str) -> None:
        """
        Delete a flashcard.

        Args:
            flashcard_id: ID of the flashcard to delete

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        with self.state.lock:
            deleted = self.flashcard_repository.delete(flashcard_id_of(flashcard_id))
        if not deleted:
            raise FlashcardNotFoundError(flashcard_id)

        self.sync_queue.delete_card(flashcard_id)
        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
