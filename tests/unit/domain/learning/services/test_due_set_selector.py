"""Tests for review-set selection."""

from datetime import timedelta

from factories import NOW, make_card

from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.learning.services import due_set_selector


def _cards() -> list:
    return [
        make_card("a", "deck-1", "due"),
        make_card("b", "deck-1", "later", next_review=NOW + timedelta(days=2)),
        make_card("c", "deck-2", "other deck"),
        make_card("d", "deck-1", "due exactly now", next_review=NOW),
    ]


class TestDueCards:
    def test_returns_due_cards_of_deck_in_order(self) -> None:
        due = due_set_selector.due_cards(_cards(), DeckId("deck-1"), NOW)
        assert [c.id.value for c in due] == ["a", "d"]

    def test_card_becomes_due_as_time_passes(self) -> None:
        later = NOW + timedelta(days=2)
        due = due_set_selector.due_cards(_cards(), DeckId("deck-1"), later)
        assert [c.id.value for c in due] == ["a", "b", "d"]

    def test_no_deck_selected_gives_empty_set(self) -> None:
        assert due_set_selector.due_cards(_cards(), None, NOW) == []


def test_review_set_in_cram_mode_ignores_due_dates() -> None:
    cards = due_set_selector.review_set(_cards(), DeckId("deck-1"), True, NOW)
    assert [c.id.value for c in cards] == ["a", "b", "d"]


def test_all_due_cards_spans_decks() -> None:
    assert [c.id.value for c in due_set_selector.all_due_cards(_cards(), NOW)] == ["a", "c", "d"]


class TestNavigation:
    def test_card_at_wraps(self) -> None:
        cards = _cards()
        assert due_set_selector.card_at(cards, 5) is cards[1]

    def test_card_at_empty(self) -> None:
        assert due_set_selector.card_at([], 3) is None

    def test_next_wraps_to_start(self) -> None:
        assert due_set_selector.next_index(2, 3) == 0

    def test_previous_wraps_to_end(self) -> None:
        assert due_set_selector.previous_index(0, 3) == 2
        assert due_set_selector.previous_index(2, 3) == 1

    def test_empty_set_leaves_index(self) -> None:
        assert due_set_selector.next_index(4, 0) == 4
        assert due_set_selector.previous_index(4, 0) == 4
