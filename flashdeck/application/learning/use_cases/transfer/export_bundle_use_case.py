"""Use case for exporting the collection as a JSON bundle."""

import re
from datetime import datetime
from typing import Any

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.services.timestamps import format_timestamp
from flashdeck.application.learning.use_cases.lookups import deck_id_of
from flashdeck.domain.common.clock import Clock, utc_now
from flashdeck.domain.learning.entities import Deck, Flashcard
from flashdeck.exceptions import DeckNotFoundError

logger = structlog.get_logger(__name__)

BUNDLE_VERSION = "1.0"


def deck_to_record(deck: Deck) -> dict[str, Any]:
    record: dict[str, Any] = {"id": deck.id.value, "name": deck.name}
    if deck.description is not None:
        record["description"] = deck.description
    record["color"] = deck.color
    record["createdAt"] = format_timestamp(deck.created_at)
    return record


def flashcard_to_record(card: Flashcard) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": card.id.value,
        "deckId": card.deck_id.value,
        "front": card.front,
        "back": card.back,
    }
    if card.front_language is not None:
        record["frontLanguage"] = card.front_language
    if card.back_language is not None:
        record["backLanguage"] = card.back_language
    record["createdAt"] = format_timestamp(card.created_at)
    if card.last_reviewed is not None:
        record["lastReviewed"] = format_timestamp(card.last_reviewed)
    record["nextReview"] = format_timestamp(card.next_review)
    record["interval"] = card.interval
    record["repetition"] = card.repetition
    record["efactor"] = card.efactor
    return record


def export_filename(deck: Deck | None, today: datetime) -> str:
    """Download name: ``flashcards-<deck-slug>-<date>.json`` or ``flashcards-all-<date>.json``."""
    stamp = today.strftime("%Y-%m-%d")
    if deck is None:
        return f"flashcards-all-{stamp}.json"
    slug = re.sub(r"\s+", "-", deck.name.lower())
    return f"flashcards-{slug}-{stamp}.json"


class ExportBundleUseCase:
    """Use case for exporting decks and cards."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        clock: Clock = utc_now,
    ) -> None:
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.clock = clock

    def export_bundle(self, deck_id: str | None = None) -> tuple[dict[str, Any], str]:
        """
        Build the export document.

        Args:
            deck_id: Limit the export to this deck and its cards

        Returns:
            Tuple of (bundle dict with camelCase keys, suggested filename)

        Raises:
            DeckNotFoundError: If a deck id is given and not found
        """
        deck: Deck | None = None
        if deck_id is None:
            decks = self.deck_repository.find_all()
            cards = self.flashcard_repository.find_all()
        else:
            deck = self.deck_repository.find_by_id(deck_id_of(deck_id))
            if not deck:
                raise DeckNotFoundError(deck_id)
            decks = [deck]
            cards = self.flashcard_repository.find_by_deck(deck.id)

        now = self.clock()
        bundle = {
            "version": BUNDLE_VERSION,
            "exportDate": format_timestamp(now),
            "decks": [deck_to_record(d) for d in decks],
            "flashcards": [flashcard_to_record(c) for c in cards],
        }
        logger.info("exported_bundle", deck_id=deck_id, decks=len(decks), flashcards=len(cards))
        return bundle, export_filename(deck, now)
