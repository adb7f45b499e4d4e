"""Save and load the library state as a JSON file."""

from datetime import datetime
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer

from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import (
    CramSessionStats,
    Deck,
    Flashcard,
    LibraryState,
    StudySession,
)

logger = structlog.get_logger(__name__)

SNAPSHOT_VERSION = 1


class DeckSnapshot(BaseModel):
    id: str
    name: str
    description: str | None = None
    color: str
    created_at: datetime


class FlashcardSnapshot(BaseModel):
    id: str
    deck_id: str
    front: str
    back: str
    front_language: str | None = None
    back_language: str | None = None
    created_at: datetime
    last_reviewed: datetime | None = None
    next_review: datetime
    interval: float
    repetition: int
    efactor: float


class CramStatsSnapshot(BaseModel):
    cards_reviewed: int = 0
    correct_answers: int = 0
    session_start_time: datetime
    total_cards: int = 0
    reviewed_card_ids: set[str] = Field(default_factory=set)

    @field_serializer("reviewed_card_ids")
    def serialize_reviewed_ids(self, value: set[str]) -> list[str]:
        return sorted(value)


class LibrarySnapshot(BaseModel):
    """On-disk layout of the library state."""

    model_config = ConfigDict(extra="ignore")

    version: int = SNAPSHOT_VERSION
    decks: list[DeckSnapshot] = Field(default_factory=list)
    flashcards: list[FlashcardSnapshot] = Field(default_factory=list)
    selected_deck_id: str | None = None
    current_card_index: int = 0
    cram_mode: bool = False
    cram_stats: CramStatsSnapshot


class JsonSnapshotRepository:
    """Persists one LibraryState to a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def save(self, state: LibraryState) -> None:
        """Write the state, replacing the previous file atomically."""
        with state.lock:
            snapshot = self._to_snapshot(state)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
        logger.info(
            "saved_snapshot",
            path=str(self.path),
            decks=len(snapshot.decks),
            flashcards=len(snapshot.flashcards),
        )

    def load(self) -> LibraryState | None:
        """
        Read the state back.

        Returns:
            The restored state, or None if no snapshot file exists

        Raises:
            pydantic.ValidationError: If the file is corrupt
        """
        if not self.path.exists():
            return None
        try:
            snapshot = LibrarySnapshot.model_validate_json(self.path.read_text(encoding="utf-8"))
        except ValidationError:
            logger.error("snapshot_unreadable", path=str(self.path))
            raise
        state = self._to_state(snapshot)
        logger.info(
            "loaded_snapshot",
            path=str(self.path),
            decks=len(state.decks),
            flashcards=len(state.flashcards),
        )
        return state

    @staticmethod
    def _to_snapshot(state: LibraryState) -> LibrarySnapshot:
        stats = state.session.cram_stats
        return LibrarySnapshot(
            decks=[
                DeckSnapshot(
                    id=d.id.value,
                    name=d.name,
                    description=d.description,
                    color=d.color,
                    created_at=d.created_at,
                )
                for d in state.deck_list()
            ],
            flashcards=[
                FlashcardSnapshot(
                    id=c.id.value,
                    deck_id=c.deck_id.value,
                    front=c.front,
                    back=c.back,
                    front_language=c.front_language,
                    back_language=c.back_language,
                    created_at=c.created_at,
                    last_reviewed=c.last_reviewed,
                    next_review=c.next_review,
                    interval=c.interval,
                    repetition=c.repetition,
                    efactor=c.efactor,
                )
                for c in state.card_list()
            ],
            selected_deck_id=state.selected_deck_id.value if state.selected_deck_id else None,
            current_card_index=state.session.current_card_index,
            cram_mode=state.session.cram_mode,
            cram_stats=CramStatsSnapshot(
                cards_reviewed=stats.cards_reviewed,
                correct_answers=stats.correct_answers,
                session_start_time=stats.session_start_time,
                total_cards=stats.total_cards,
                reviewed_card_ids=set(stats.reviewed_card_ids),
            ),
        )

    @staticmethod
    def _to_state(snapshot: LibrarySnapshot) -> LibraryState:
        decks = [
            Deck.create_with_id(
                id=DeckId(d.id),
                name=d.name,
                description=d.description,
                color=d.color,
                created_at=d.created_at,
            )
            for d in snapshot.decks
        ]
        cards = [
            Flashcard.create_with_id(
                id=FlashcardId(c.id),
                deck_id=DeckId(c.deck_id),
                front=c.front,
                back=c.back,
                front_language=c.front_language,
                back_language=c.back_language,
                created_at=c.created_at,
                last_reviewed=c.last_reviewed,
                next_review=c.next_review,
                interval=c.interval,
                repetition=c.repetition,
                efactor=c.efactor,
            )
            for c in snapshot.flashcards
        ]
        selected = DeckId(snapshot.selected_deck_id) if snapshot.selected_deck_id else None
        by_id = {deck.id: deck for deck in decks}
        stats = snapshot.cram_stats
        return LibraryState(
            decks=by_id,
            flashcards={card.id: card for card in cards},
            selected_deck_id=selected if selected in by_id else next(iter(by_id), None),
            session=StudySession(
                current_card_index=snapshot.current_card_index,
                cram_mode=snapshot.cram_mode,
                cram_stats=CramSessionStats(
                    cards_reviewed=stats.cards_reviewed,
                    correct_answers=stats.correct_answers,
                    session_start_time=stats.session_start_time,
                    total_cards=stats.total_cards,
                    reviewed_card_ids=set(stats.reviewed_card_ids),
                ),
            ),
        )
