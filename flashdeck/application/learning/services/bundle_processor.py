"""Turn a validated bundle into domain entities."""

from collections.abc import Mapping
from typing import Any

from flashdeck.application.learning.services.timestamps import parse_timestamp
from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import DEFAULT_DECK_COLOR, Deck, Flashcard


def _optional_text(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


class BundleProcessor:
    """
    Builds Deck and Flashcard entities from bundle records.

    Expects input that already passed ``BundleValidator``. Ids are kept
    verbatim; conflict handling happens later.
    """

    def __init__(self, default_color: str = DEFAULT_DECK_COLOR) -> None:
        self.default_color = default_color

    def to_entities(self, payload: Mapping[str, Any]) -> tuple[list[Deck], list[Flashcard]]:
        decks = [self._to_deck(record) for record in payload["decks"]]
        cards = [self._to_card(record) for record in payload["flashcards"]]
        return decks, cards

    def _to_deck(self, record: Mapping[str, Any]) -> Deck:
        return Deck.create_with_id(
            id=DeckId(record["id"]),
            name=record["name"],
            description=_optional_text(record.get("description")),
            color=record.get("color") or self.default_color,
            created_at=parse_timestamp(record["createdAt"]),
        )

    def _to_card(self, record: Mapping[str, Any]) -> Flashcard:
        last_reviewed = record.get("lastReviewed")
        return Flashcard.create_with_id(
            id=FlashcardId(record["id"]),
            deck_id=DeckId(record["deckId"]),
            front=record["front"],
            back=record["back"],
            front_language=_optional_text(record.get("frontLanguage")),
            back_language=_optional_text(record.get("backLanguage")),
            created_at=parse_timestamp(record["createdAt"]),
            last_reviewed=parse_timestamp(last_reviewed) if last_reviewed is not None else None,
            next_review=parse_timestamp(record["nextReview"]),
            interval=float(record["interval"]),
            repetition=int(record["repetition"]),
            efactor=float(record["efactor"]),
        )
