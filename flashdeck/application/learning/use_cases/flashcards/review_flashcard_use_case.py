"""Use case for grading a flashcard."""

from typing import Literal

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.application.learning.use_cases.dtos import ReviewOutcome
from flashdeck.application.learning.use_cases.lookups import flashcard_id_of
from flashdeck.domain.common.clock import Clock, utc_now
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.domain.learning.services import Sm2Scheduler
from flashdeck.domain.learning.value_objects import Grade
from flashdeck.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)

GradeScale = Literal["sm2", "rating"]


class ReviewFlashcardUseCase:
    """
    Grade a card.

    Outside cram mode the grade goes through the SM-2 scheduler and the
    card's scheduling state is written back and queued for sync. In cram
    mode only the session counters move; the card is left untouched.
    """

    def __init__(
        self,
        state: LibraryState,
        flashcard_repository: FlashcardRepositoryProtocol,
        sync_queue: SyncQueueProtocol,
        scheduler: Sm2Scheduler,
        clock: Clock = utc_now,
    ) -> None:
        self.state = state
        self.flashcard_repository = flashcard_repository
        self.sync_queue = sync_queue
        self.scheduler = scheduler
        self.clock = clock

    def review_flashcard(
        self, flashcard_id: str, grade: object, scale: GradeScale = "sm2"
    ) -> ReviewOutcome:
        """
        Grade a flashcard.

        Args:
            flashcard_id: ID of the reviewed card
            grade: Raw grade, 0-5 on the "sm2" scale or 1-5 on the "rating" scale
            scale: Which scale ``grade`` is on

        Returns:
            ReviewOutcome with the (possibly updated) card

        Raises:
            InvalidGradeError: If the grade is not on the scale
            FlashcardNotFoundError: If flashcard is not found
        """
        parsed = Grade.from_rating(grade) if scale == "rating" else Grade.parse(grade)

        with self.state.lock:
            flashcard = self.flashcard_repository.find_by_id(flashcard_id_of(flashcard_id))
            if not flashcard:
                raise FlashcardNotFoundError(flashcard_id)

            if self.state.session.cram_mode:
                self.state.session.record_cram_review(flashcard.id, parsed)
                logger.debug("recorded_cram_review", flashcard_id=flashcard_id, grade=int(parsed))
                return ReviewOutcome(
                    flashcard=flashcard,
                    grade=parsed,
                    cram=True,
                    cram_stats=self.state.session.cram_stats,
                )

            now = self.clock()
            flashcard.apply_review(self.scheduler.schedule(flashcard.memory_state, parsed), now)
            flashcard = self.flashcard_repository.save(flashcard)

        self.sync_queue.upsert_card(flashcard)
        logger.info(
            "reviewed_flashcard",
            flashcard_id=flashcard_id,
            grade=int(parsed),
            interval=flashcard.interval,
            repetition=flashcard.repetition,
        )
        return ReviewOutcome(flashcard=flashcard, grade=parsed, cram=False)
