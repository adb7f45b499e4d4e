"""
The owned state of one running study instance.

A single LibraryState holds every deck and card plus the study session.
It is created once and passed by reference to the repositories and use
cases that need it; nothing else keeps a copy.
"""

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.domain.learning.entities.study_session import StudySession


@dataclass
class LibraryState:
    """
    In-memory collection of decks and flashcards.

    Insertion order of ``decks`` and ``flashcards`` is the collection order
    used for review sets and deck fallback. All mutations run while holding
    ``lock`` so no two of them interleave.
    """

    decks: dict[DeckId, Deck] = field(default_factory=dict)
    flashcards: dict[FlashcardId, Flashcard] = field(default_factory=dict)
    selected_deck_id: DeckId | None = None
    session: StudySession = field(default_factory=StudySession)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def deck_list(self) -> list[Deck]:
        return list(self.decks.values())

    def card_list(self) -> list[Flashcard]:
        return list(self.flashcards.values())

    @property
    def selected_deck(self) -> Deck | None:
        if self.selected_deck_id is None:
            return None
        return self.decks.get(self.selected_deck_id)

    def replace_collection(self, decks: Iterable[Deck], flashcards: Iterable[Flashcard]) -> None:
        """
        Swap in a whole new collection in one step.

        Selection moves to the first deck and the study session resets.
        """
        with self.lock:
            self.decks = {deck.id: deck for deck in decks}
            self.flashcards = {card.id: card for card in flashcards}
            self.selected_deck_id = next(iter(self.decks), None)
            self.session.reset()

    def restore_from(self, other: "LibraryState") -> None:
        """Take over another state's collection, selection and session."""
        with self.lock:
            self.decks = dict(other.decks)
            self.flashcards = dict(other.flashcards)
            self.selected_deck_id = other.selected_deck_id
            self.session = other.session
