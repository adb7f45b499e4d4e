"""
Review-set selection.

Plain query functions over the card collection. Every call compares
against the ``now`` it is given, so callers pass the wall-clock time at
the moment of evaluation and the set can change between calls.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.learning.entities.flashcard import Flashcard


def all_cards(cards: Iterable[Flashcard], deck_id: DeckId | None) -> list[Flashcard]:
    """Every card in the deck, regardless of due date (cram mode)."""
    if deck_id is None:
        return []
    return [card for card in cards if card.belongs_to_deck(deck_id)]


def due_cards(cards: Iterable[Flashcard], deck_id: DeckId | None, now: datetime) -> list[Flashcard]:
    """Cards in the deck whose next review is at or before ``now``."""
    return [card for card in all_cards(cards, deck_id) if card.is_due(now)]


def all_due_cards(cards: Iterable[Flashcard], now: datetime) -> list[Flashcard]:
    """Due cards across every deck."""
    return [card for card in cards if card.is_due(now)]


def review_set(
    cards: Iterable[Flashcard],
    deck_id: DeckId | None,
    cram_mode: bool,
    now: datetime,
) -> list[Flashcard]:
    """The cards currently up for review in the selected deck."""
    if cram_mode:
        return all_cards(cards, deck_id)
    return due_cards(cards, deck_id, now)


def card_at(cards: Sequence[Flashcard], index: int) -> Flashcard | None:
    """Element at a cyclic index; None for an empty set."""
    if not cards:
        return None
    return cards[index % len(cards)]


def next_index(index: int, size: int) -> int:
    if size == 0:
        return index
    return (index + 1) % size


def previous_index(index: int, size: int) -> int:
    if size == 0:
        return index
    return size - 1 if index % size == 0 else (index % size) - 1
