"""
Structural validation of import bundles.

Checks run in a fixed order and stop at the first failure, so the user
always sees the earliest problem in the document.
"""

import json
import math
from collections.abc import Mapping
from numbers import Integral, Real

from flashdeck.application.learning.services.timestamps import is_timestamp
from flashdeck.domain.learning.value_objects import MIN_EFACTOR
from flashdeck.exceptions import ImportValidationError


def _show(value: object) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


def _kind(value: object) -> str:
    return "missing" if value is None else type(value).__name__


def _non_empty_str(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return not math.isnan(float(value))
    except OverflowError:
        return False


def _fits_float(value: object) -> bool:
    try:
        float(value)  # type: ignore[arg-type]
    except OverflowError:
        return False
    return True


class BundleValidator:
    """Validates the shape of an import bundle before anything is applied."""

    def validate(self, payload: object) -> None:
        """
        Check a decoded bundle.

        Raises:
            ImportValidationError: On the first failed check, naming the
                field and the 1-based deck or card position
        """
        if not isinstance(payload, Mapping):
            raise ImportValidationError("Invalid file format - not a valid JSON object")
        if not payload.get("version"):
            raise ImportValidationError("Missing version field", field="version")
        decks = payload.get("decks")
        if not isinstance(decks, list):
            raise ImportValidationError("Missing or invalid decks array", field="decks")
        cards = payload.get("flashcards")
        if not isinstance(cards, list):
            raise ImportValidationError("Missing or invalid flashcards array", field="flashcards")

        deck_ids: dict[str, None] = {}
        for position, deck in enumerate(decks, start=1):
            self._validate_deck(position, deck)
            deck_ids.setdefault(deck["id"])

        for position, card in enumerate(cards, start=1):
            self._validate_card(position, card, deck_ids)

    def _validate_deck(self, i: int, deck: object) -> None:
        if not isinstance(deck, Mapping):
            raise ImportValidationError(f"Deck {i}: Not an object", index=i)
        deck_id = deck.get("id")
        if not _non_empty_str(deck_id):
            raise ImportValidationError(
                f"Deck {i}: Missing or invalid id (got: {_kind(deck_id)}, value: {_show(deck_id)})",
                field="id",
                index=i,
            )
        name = deck.get("name")
        if not _non_empty_str(name):
            raise ImportValidationError(
                f"Deck {i}: Missing or invalid name (got: {_kind(name)}, value: {_show(name)})",
                field="name",
                index=i,
            )
        if deck.get("createdAt") is None:
            raise ImportValidationError(f"Deck {i}: Missing createdAt", field="createdAt", index=i)
        if not is_timestamp(deck["createdAt"]):
            raise ImportValidationError(
                f"Deck {i}: Invalid createdAt (value: {_show(deck['createdAt'])})",
                field="createdAt",
                index=i,
            )
        if deck.get("color") is not None and not isinstance(deck["color"], str):
            raise ImportValidationError(f"Deck {i}: Invalid color field", field="color", index=i)
        if deck.get("description") is not None and not isinstance(deck["description"], str):
            raise ImportValidationError(
                f"Deck {i}: Invalid description field", field="description", index=i
            )

    def _validate_card(self, i: int, card: object, deck_ids: dict[str, None]) -> None:
        if not isinstance(card, Mapping):
            raise ImportValidationError(f"Card {i}: Not an object", index=i)
        card_id = card.get("id")
        if not _non_empty_str(card_id):
            raise ImportValidationError(
                f"Card {i}: Missing or invalid id (got: {_kind(card_id)}, value: {_show(card_id)})",
                field="id",
                index=i,
            )

        deck_id = card.get("deckId")
        if deck_id is None:
            raise ImportValidationError(
                f"Card {i}: Missing deckId (value: {_show(deck_id)})", field="deckId", index=i
            )
        if not isinstance(deck_id, str):
            raise ImportValidationError(
                f"Card {i}: Invalid deckId type (got: {_kind(deck_id)}, value: {_show(deck_id)})",
                field="deckId",
                index=i,
            )
        if not deck_id.strip():
            raise ImportValidationError(f"Card {i}: Empty deckId string", field="deckId", index=i)
        if deck_id not in deck_ids:
            raise ImportValidationError(
                f'Card {i}: References non-existent deck ID "{deck_id}". '
                f"Available deck IDs: {', '.join(deck_ids)}",
                field="deckId",
                index=i,
            )

        for name in ("front", "back"):
            if not _non_empty_str(card.get(name)):
                raise ImportValidationError(
                    f"Card {i}: Missing or invalid {name} content (got: {_kind(card.get(name))})",
                    field=name,
                    index=i,
                )

        for name in ("createdAt", "nextReview"):
            if card.get(name) is None:
                raise ImportValidationError(f"Card {i}: Missing {name}", field=name, index=i)
            if not is_timestamp(card[name]):
                raise ImportValidationError(
                    f"Card {i}: Invalid {name} (value: {_show(card[name])})", field=name, index=i
                )
        if card.get("lastReviewed") is not None and not is_timestamp(card["lastReviewed"]):
            raise ImportValidationError(
                f"Card {i}: Invalid lastReviewed (value: {_show(card['lastReviewed'])})",
                field="lastReviewed",
                index=i,
            )

        for name in ("interval", "repetition", "efactor"):
            if name not in card or card[name] is None:
                raise ImportValidationError(f"Card {i}: Missing {name} field", field=name, index=i)
            value = card[name]
            if isinstance(value, Real) and not _fits_float(value):
                raise ImportValidationError(
                    f"Card {i}: Invalid {name} (number out of range)", field=name, index=i
                )
            if not _is_number(value):
                raise ImportValidationError(
                    f"Card {i}: Invalid {name} (must be a number, "
                    f"got {_kind(value)}, value: {_show(value)})",
                    field=name,
                    index=i,
                )
        self._validate_ranges(i, card)

        for name in ("frontLanguage", "backLanguage"):
            if card.get(name) is not None and not isinstance(card[name], str):
                raise ImportValidationError(
                    f"Card {i}: Invalid {name} (must be string)", field=name, index=i
                )

    def _validate_ranges(self, i: int, card: Mapping[str, object]) -> None:
        interval = float(card["interval"])  # type: ignore[arg-type]
        repetition = card["repetition"]
        efactor = float(card["efactor"])  # type: ignore[arg-type]

        if not (math.isfinite(interval) and interval > 0):
            raise ImportValidationError(
                f"Card {i}: Invalid interval (must be positive, value: {_show(interval)})",
                field="interval",
                index=i,
            )
        as_float = float(repetition)  # type: ignore[arg-type]
        integral = isinstance(repetition, Integral) or (
            math.isfinite(as_float) and as_float.is_integer()
        )
        if not integral or as_float < 0:
            raise ImportValidationError(
                f"Card {i}: Invalid repetition (must be a non-negative integer, "
                f"value: {_show(repetition)})",
                field="repetition",
                index=i,
            )
        if not (math.isfinite(efactor) and efactor >= MIN_EFACTOR):
            raise ImportValidationError(
                f"Card {i}: Invalid efactor (must be at least {MIN_EFACTOR}, "
                f"value: {_show(efactor)})",
                field="efactor",
                index=i,
            )
