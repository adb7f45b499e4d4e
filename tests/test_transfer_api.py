"""Tests for the import and export endpoints."""

from collections.abc import Generator

import pytest
from dependency_injector import providers
from factories import bundle, bundle_card, bundle_deck
from fastapi.testclient import TestClient
from starlette import status

from flashdeck.core import container
from flashdeck.exceptions import BundleFetchError


class FakeFetcher:
    def __init__(self) -> None:
        self.documents: dict[str, object] = {}

    async def fetch(self, url: str) -> object:
        if url not in self.documents:
            raise BundleFetchError(url, "HTTP 404: Not Found")
        return self.documents[url]

    async def close(self) -> None:
        return None


@pytest.fixture
def fetcher(client: TestClient) -> Generator[FakeFetcher, None, None]:
    fake = FakeFetcher()
    container.import_bundle_use_case.reset()
    container.bundle_fetcher.override(providers.Object(fake))
    yield fake
    container.bundle_fetcher.reset_override()


class TestExport:
    """Tests for GET /api/v1/export."""

    def test_export_all(self, client: TestClient) -> None:
        """Should return the whole collection as an attachment."""
        deck = client.post("/api/v1/decks", json={"name": "Spanish Verbs"}).json()
        client.post("/api/v1/flashcards", json={"front": "ser", "back": "to be"})

        response = client.get("/api/v1/export")

        assert response.status_code == status.HTTP_200_OK
        assert "flashcards-all-" in response.headers["content-disposition"]
        data = response.json()
        assert data["version"] == "1.0"
        assert [d["id"] for d in data["decks"]] == [deck["id"]]
        assert data["flashcards"][0]["deckId"] == deck["id"]
        assert data["flashcards"][0]["nextReview"].endswith("Z")

    def test_export_one_deck(self, client: TestClient) -> None:
        """Should name the file after the deck."""
        deck = client.post("/api/v1/decks", json={"name": "Spanish Verbs"}).json()

        response = client.get("/api/v1/export", params={"deck_id": deck["id"]})

        assert "flashcards-spanish-verbs-" in response.headers["content-disposition"]

    def test_export_missing_deck(self, client: TestClient) -> None:
        """Should return 404 for an unknown deck."""
        response = client.get("/api/v1/export", params={"deck_id": "nope"})
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestImport:
    """Tests for POST /api/v1/import."""

    def test_import_into_empty_library(self, client: TestClient) -> None:
        """Should add decks and cards and report success."""
        response = client.post("/api/v1/import", json={"bundle": bundle()})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "imported_decks": 1,
            "imported_cards": 1,
            "skipped_cards": 0,
            "conflicts": [],
        }
        listing = client.get("/api/v1/decks").json()
        assert listing["decks"][0]["id"] == "d1"
        assert listing["selected_deck_id"] == "d1"

    def test_default_strategy_renames(self, client: TestClient) -> None:
        """Should import a clashing deck under a new name."""
        client.post("/api/v1/decks", json={"name": "General"})

        response = client.post("/api/v1/import", json={"bundle": bundle()})

        assert response.json()["conflicts"] == [
            {"type": "deck", "name": "General", "action": 'renamed to "General (Imported)"'}
        ]
        names = [d["name"] for d in client.get("/api/v1/decks").json()["decks"]]
        assert names == ["General", "General (Imported)"]

    def test_replace_strategy(self, client: TestClient) -> None:
        """Should overwrite the clashing card's content and schedule."""
        deck_id = client.post("/api/v1/decks", json={"name": "General"}).json()["id"]
        card_id = client.post(
            "/api/v1/flashcards", json={"front": "Question", "back": "Old"}
        ).json()["id"]
        payload = bundle(cards=[bundle_card(back="New", repetition=4, interval=20)])

        response = client.post("/api/v1/import", json={"bundle": payload, "strategy": "replace"})

        actions = [c["action"] for c in response.json()["conflicts"]]
        assert actions == ["replaced", "replaced"]
        cards = client.get(f"/api/v1/decks/{deck_id}/flashcards").json()["flashcards"]
        assert [(c["id"], c["back"], c["repetition"]) for c in cards] == [(card_id, "New", 4)]

    def test_invalid_bundle(self, client: TestClient) -> None:
        """Should answer 422 with the field diagnostic and apply nothing."""
        payload = bundle(decks=[bundle_deck(), bundle_deck("d2", "")])

        response = client.post("/api/v1/import", json={"bundle": payload})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["detail"].startswith("Deck 2:")
        assert client.get("/api/v1/decks").json()["decks"] == []
        import_status = client.get("/api/v1/import/status").json()
        assert import_status["status"] == "error"
        assert import_status["error"] == response.json()["detail"]

    def test_number_too_large_for_float(self, client: TestClient) -> None:
        """Should reject an oversized number with a field diagnostic, not a server error."""
        payload = bundle(cards=[bundle_card(efactor=10**400)])

        response = client.post("/api/v1/import", json={"bundle": payload})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["detail"] == "Card 1: Invalid efactor (number out of range)"
        assert client.get("/api/v1/import/status").json()["status"] == "error"

    def test_unknown_strategy(self, client: TestClient) -> None:
        """Should fail request validation for an unknown strategy."""
        response = client.post("/api/v1/import", json={"bundle": bundle(), "strategy": "merge"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_status_after_success(self, client: TestClient) -> None:
        """Should expose the outcome of the last import."""
        assert client.get("/api/v1/import/status").json()["status"] == "idle"
        client.post("/api/v1/import", json={"bundle": bundle(), "strategy": "skip"})

        data = client.get("/api/v1/import/status").json()
        assert data["status"] == "success"
        assert data["strategy"] == "skip"
        assert data["imported_cards"] == 1


class TestRemoteImport:
    """Tests for POST /api/v1/import/remote."""

    def test_remote_import(self, client: TestClient, fetcher: FakeFetcher) -> None:
        """Should download the bundle and import it."""
        fetcher.documents["https://example.com/deck.json"] = bundle()

        response = client.post(
            "/api/v1/import/remote", json={"url": "https://example.com/deck.json"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["imported_decks"] == 1

    def test_remote_failure(self, client: TestClient, fetcher: FakeFetcher) -> None:
        """Should answer 502 and leave the library alone."""
        response = client.post(
            "/api/v1/import/remote", json={"url": "https://example.com/missing.json"}
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert "HTTP 404" in response.json()["detail"]
        assert client.get("/api/v1/decks").json()["decks"] == []

    def test_non_positive_timeout(self, client: TestClient) -> None:
        """Should reject a zero timeout."""
        response = client.post(
            "/api/v1/import/remote", json={"url": "https://example.com/x.json", "timeout": 0}
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
