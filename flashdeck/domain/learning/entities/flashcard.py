"""
Flashcard entity for spaced repetition learning.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from flashdeck.domain.common.clock import to_millis, utc_now
from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.value_objects import MemoryState

# Fresh cards are back-dated so they are due the moment they exist.
NEW_CARD_DUE_OFFSET = timedelta(minutes=1)


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Study card owned by a deck.

    Business Rules:
    - Front and back cannot be empty
    - Flashcard must be associated with a deck
    - A never-reviewed card has no last_reviewed timestamp
    - After a scheduled review, next_review == last_reviewed + interval days
    """

    id: FlashcardId
    deck_id: DeckId
    front: str
    back: str
    created_at: datetime
    next_review: datetime
    interval: float
    repetition: int
    efactor: float
    front_language: str | None = None
    back_language: str | None = None
    last_reviewed: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.front or not self.front.strip():
            raise DomainError("Front cannot be empty")
        if not self.back or not self.back.strip():
            raise DomainError("Back cannot be empty")
        # Raises on out-of-range scheduling parameters
        self.memory_state  # noqa: B018

    @property
    def memory_state(self) -> MemoryState:
        return MemoryState(
            interval=self.interval, repetition=self.repetition, efactor=self.efactor
        )

    @property
    def is_new(self) -> bool:
        return self.last_reviewed is None

    def is_due(self, now: datetime) -> bool:
        return self.next_review <= now

    def belongs_to_deck(self, deck_id: DeckId) -> bool:
        return self.deck_id == deck_id

    def update_content(
        self,
        front: str,
        back: str,
        front_language: str | None = None,
        back_language: str | None = None,
    ) -> None:
        """
        Replace the card's content and language hints.

        Scheduling fields are left untouched.

        Raises:
            DomainError: If front or back is empty after trimming
        """
        if not front or not front.strip():
            raise DomainError("Front cannot be empty")
        if not back or not back.strip():
            raise DomainError("Back cannot be empty")
        self.front = front.strip()
        self.back = back.strip()
        self.front_language = front_language or None
        self.back_language = back_language or None

    def apply_review(self, state: MemoryState, reviewed_at: datetime) -> None:
        """
        Write a scheduler result back onto the card.

        Args:
            state: Memory state returned by the scheduler
            reviewed_at: Moment of the review
        """
        self.interval = state.interval
        self.repetition = state.repetition
        self.efactor = state.efactor
        reviewed_at = to_millis(reviewed_at)
        self.last_reviewed = reviewed_at
        self.next_review = reviewed_at + timedelta(days=state.interval)

    @classmethod
    def create(
        cls,
        deck_id: DeckId,
        front: str,
        back: str,
        front_language: str | None = None,
        back_language: str | None = None,
        now: datetime | None = None,
    ) -> "Flashcard":
        """Create a new, immediately due flashcard with a fresh id."""
        created_at = to_millis(now) if now else utc_now()
        initial = MemoryState.initial()
        return cls(
            id=FlashcardId.generate(),
            deck_id=deck_id,
            front=front.strip(),
            back=back.strip(),
            front_language=front_language or None,
            back_language=back_language or None,
            created_at=created_at,
            next_review=created_at - NEW_CARD_DUE_OFFSET,
            interval=initial.interval,
            repetition=initial.repetition,
            efactor=initial.efactor,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        deck_id: DeckId,
        front: str,
        back: str,
        created_at: datetime,
        next_review: datetime,
        interval: float,
        repetition: int,
        efactor: float,
        front_language: str | None = None,
        back_language: str | None = None,
        last_reviewed: datetime | None = None,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence or an import bundle."""
        return cls(
            id=id,
            deck_id=deck_id,
            front=front,
            back=back,
            front_language=front_language,
            back_language=back_language,
            created_at=created_at,
            last_reviewed=last_reviewed,
            next_review=next_review,
            interval=interval,
            repetition=repetition,
            efactor=efactor,
        )
