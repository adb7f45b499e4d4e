"""External record store backed by SQLAlchemy."""

import asyncio
from collections.abc import Callable, Sequence
from typing import TypeVar

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from flashdeck.domain.learning.entities import Deck, Flashcard
from flashdeck.exceptions import SyncError
from flashdeck.infrastructure.learning.mappers import DeckMapper, FlashcardMapper
from flashdeck.models import Deck as DeckORM
from flashdeck.models import Flashcard as FlashcardORM

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class SqlAlchemyRecordStore:
    """
    Record store over the ``decks`` and ``flashcards`` tables.

    Each call runs in its own session on a worker thread. Database
    failures surface as ``SyncError``.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.deck_mapper = DeckMapper()
        self.flashcard_mapper = FlashcardMapper()

    async def _run(self, operation: str, work: Callable[[Session], T]) -> T:
        def call() -> T:
            with self.session_factory() as session:
                try:
                    result = work(session)
                    session.commit()
                except SQLAlchemyError:
                    session.rollback()
                    raise
                return result

        try:
            return await asyncio.to_thread(call)
        except SQLAlchemyError as e:
            logger.error("record_store_error", operation=operation, error=str(e))
            raise SyncError(operation, str(e)) from e

    async def get_decks(self, owner_id: str) -> list[Deck]:
        def work(session: Session) -> list[Deck]:
            stmt = select(DeckORM).where(DeckORM.owner_id == owner_id).order_by(DeckORM.created_at)
            return [self.deck_mapper.to_domain(orm) for orm in session.execute(stmt).scalars()]

        return await self._run("get_decks", work)

    async def get_cards(self, owner_id: str, deck_id: str | None = None) -> list[Flashcard]:
        def work(session: Session) -> list[Flashcard]:
            stmt = select(FlashcardORM).where(FlashcardORM.owner_id == owner_id)
            if deck_id is not None:
                stmt = stmt.where(FlashcardORM.deck_id == deck_id)
            stmt = stmt.order_by(FlashcardORM.created_at)
            return [
                self.flashcard_mapper.to_domain(orm) for orm in session.execute(stmt).scalars()
            ]

        return await self._run("get_cards", work)

    def _upsert_deck(self, session: Session, owner_id: str, deck: Deck) -> None:
        existing = session.get(DeckORM, deck.id.value)
        session.add(self.deck_mapper.to_orm(deck, owner_id, existing))

    def _upsert_card(self, session: Session, owner_id: str, card: Flashcard) -> None:
        existing = session.get(FlashcardORM, card.id.value)
        session.add(self.flashcard_mapper.to_orm(card, owner_id, existing))

    async def upsert_deck(self, owner_id: str, deck: Deck) -> None:
        await self._run("upsert_deck", lambda s: self._upsert_deck(s, owner_id, deck))

    async def upsert_card(self, owner_id: str, card: Flashcard) -> None:
        await self._run("upsert_card", lambda s: self._upsert_card(s, owner_id, card))

    async def delete_deck(self, owner_id: str, deck_id: str) -> None:
        def work(session: Session) -> None:
            session.execute(
                delete(FlashcardORM).where(
                    FlashcardORM.owner_id == owner_id, FlashcardORM.deck_id == deck_id
                )
            )
            session.execute(
                delete(DeckORM).where(DeckORM.owner_id == owner_id, DeckORM.id == deck_id)
            )

        await self._run("delete_deck", work)

    async def delete_card(self, owner_id: str, card_id: str) -> None:
        def work(session: Session) -> None:
            session.execute(
                delete(FlashcardORM).where(
                    FlashcardORM.owner_id == owner_id, FlashcardORM.id == card_id
                )
            )

        await self._run("delete_card", work)

    async def sync_all(
        self, owner_id: str, decks: Sequence[Deck], cards: Sequence[Flashcard]
    ) -> None:
        def work(session: Session) -> None:
            for deck in decks:
                self._upsert_deck(session, owner_id, deck)
            session.flush()
            for card in cards:
                self._upsert_card(session, owner_id, card)

        await self._run("sync_all", work)
        logger.info("record_store_synced", owner_id=owner_id, decks=len(decks), cards=len(cards))
