"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import timedelta
from pathlib import Path
from typing import Any

import pytest
from dependency_injector import providers
from factories import NOW, RecordingSyncQueue, make_card, make_deck
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from flashdeck.config import Settings
from flashdeck.core import container
from flashdeck.database import Base, build_engine
from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.infrastructure.learning.repositories import DeckRepository, FlashcardRepository
from flashdeck.infrastructure.learning.store import SqlAlchemyRecordStore
from flashdeck.main import create_app


@pytest.fixture
def state() -> LibraryState:
    """Library with two decks; deck-1 selected."""
    return LibraryState(
        decks={
            DeckId("deck-1"): make_deck("deck-1", "General"),
            DeckId("deck-2"): make_deck("deck-2", "Spanish"),
        },
        flashcards={
            FlashcardId("card-1"): make_card("card-1", "deck-1", "Q1"),
            FlashcardId("card-2"): make_card(
                "card-2", "deck-1", "Q2", next_review=NOW + timedelta(days=3)
            ),
            FlashcardId("card-3"): make_card("card-3", "deck-2", "Hola"),
        },
        selected_deck_id=DeckId("deck-1"),
    )


@pytest.fixture
def deck_repository(state: LibraryState) -> DeckRepository:
    return DeckRepository(state)


@pytest.fixture
def flashcard_repository(state: LibraryState) -> FlashcardRepository:
    return FlashcardRepository(state)


@pytest.fixture
def sync_queue() -> RecordingSyncQueue:
    return RecordingSyncQueue()


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Fresh in-memory SQLite database for each test."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def record_store(session_factory: sessionmaker[Session]) -> SqlAlchemyRecordStore:
    return SqlAlchemyRecordStore(session_factory)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        ENVIRONMENT="test",
        DATABASE_URL="sqlite://",
        STATE_FILE=tmp_path / "state.json",
        SEED_SAMPLE_DATA=False,
        SYNC_ENABLED=False,
        SYNC_RETRY_DELAY_SECONDS=0.0,
    )


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, Any, None]:
    """Test client over an empty library with outbound sync switched off."""
    container.reset_singletons()
    container.settings.override(providers.Object(test_settings))

    with TestClient(create_app()) as test_client:
        yield test_client

    container.settings.reset_override()
    container.reset_singletons()
