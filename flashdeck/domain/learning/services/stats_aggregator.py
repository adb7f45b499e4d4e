"""
Summary statistics over the card collection.

Pure functions; the caller supplies ``now`` and, optionally, the time zone
whose midnight starts "today". Without one the host's local zone is used.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from decimal import ROUND_HALF_UP, Decimal

from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.services.due_set_selector import all_cards, all_due_cards
from flashdeck.domain.learning.value_objects import INITIAL_EFACTOR


@dataclass(frozen=True)
class FlashcardStats:
    """Aggregate metrics for a set of cards."""

    total_cards: int
    due_cards: int
    reviewed_today: int
    average_efactor: float


@dataclass(frozen=True)
class DeckStats(FlashcardStats):
    """Aggregate metrics for one deck."""

    deck_id: str
    deck_name: str


def day_bounds(now: datetime, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Start (local midnight) and end of the calendar day containing ``now``."""
    local_now = now.astimezone(tz)
    start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def average_efactor(cards: Sequence[Flashcard]) -> float:
    """Mean ease factor rounded to 2 places; 2.5 for no cards."""
    if not cards:
        return INITIAL_EFACTOR
    mean = sum(card.efactor for card in cards) / len(cards)
    return float(Decimal(repr(mean)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def overall_stats(
    cards: Iterable[Flashcard], now: datetime, tz: tzinfo | None = None
) -> FlashcardStats:
    """Stats over every card regardless of deck."""
    card_list = list(cards)
    start, end = day_bounds(now, tz)
    return FlashcardStats(
        total_cards=len(card_list),
        due_cards=len(all_due_cards(card_list, now)),
        reviewed_today=sum(
            1
            for card in card_list
            if card.last_reviewed is not None and start <= card.last_reviewed < end
        ),
        average_efactor=average_efactor(card_list),
    )


def deck_stats(
    cards: Iterable[Flashcard], deck: Deck, now: datetime, tz: tzinfo | None = None
) -> DeckStats:
    """Stats over the cards of one deck."""
    totals = overall_stats(all_cards(cards, deck.id), now, tz)
    return DeckStats(
        deck_id=deck.id.value,
        deck_name=deck.name,
        total_cards=totals.total_cards,
        due_cards=totals.due_cards,
        reviewed_today=totals.reviewed_today,
        average_efactor=totals.average_efactor,
    )
