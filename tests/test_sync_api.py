"""Tests for the sync endpoints."""

import asyncio
from collections.abc import Generator
from typing import Any

import pytest
from dependency_injector import providers
from factories import make_card, make_deck
from fastapi.testclient import TestClient
from starlette import status

from flashdeck.config import Settings
from flashdeck.core import container
from flashdeck.main import create_app


@pytest.fixture
def synced_client(test_settings: Settings) -> Generator[TestClient, Any, None]:
    """Test client with the outbox writing to the in-memory store."""
    settings = test_settings.model_copy(update={"SYNC_ENABLED": True})
    container.reset_singletons()
    container.settings.override(providers.Object(settings))

    with TestClient(create_app()) as test_client:
        yield test_client

    container.settings.reset_override()
    container.reset_singletons()


def test_status_starts_online(client: TestClient) -> None:
    response = client.get("/api/v1/sync/status")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["is_online"] is True
    assert data["pending"] == 0
    assert data["error"] is None


def test_pull_merges_store_records(client: TestClient) -> None:
    local = client.post("/api/v1/decks", json={"name": "Local"}).json()
    store = container.record_store()
    owner = container.settings().OWNER_ID
    asyncio.run(store.upsert_deck(owner, make_deck("remote-deck", "Remote")))
    asyncio.run(store.upsert_card(owner, make_card("remote-card", "remote-deck")))

    response = client.post("/api/v1/sync")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert (data["decks"], data["flashcards"]) == (2, 1)
    assert data["status"]["last_sync"] is not None
    listing = client.get("/api/v1/decks").json()
    assert [d["id"] for d in listing["decks"]] == [local["id"], "remote-deck"]
    assert listing["selected_deck_id"] == local["id"]


def test_pull_keeps_a_local_delete(synced_client: TestClient) -> None:
    keep = synced_client.post("/api/v1/decks", json={"name": "Keep"}).json()
    gone = synced_client.post("/api/v1/decks", json={"name": "Gone"}).json()
    synced_client.post(
        "/api/v1/flashcards", json={"front": "Q", "back": "A", "deck_id": gone["id"]}
    )
    assert synced_client.post("/api/v1/sync").json()["decks"] == 2

    synced_client.delete(f"/api/v1/decks/{gone['id']}")
    response = synced_client.post("/api/v1/sync")

    assert response.status_code == status.HTTP_200_OK
    assert (response.json()["decks"], response.json()["flashcards"]) == (1, 0)
    listing = synced_client.get("/api/v1/decks").json()["decks"]
    assert [d["id"] for d in listing] == [keep["id"]]
    owner = container.settings().OWNER_ID
    remote = asyncio.run(container.record_store().get_decks(owner))
    assert [d.id.value for d in remote] == [keep["id"]]
