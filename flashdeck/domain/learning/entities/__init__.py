"""Learning entities."""

from .deck import DEFAULT_DECK_COLOR, Deck
from .flashcard import NEW_CARD_DUE_OFFSET, Flashcard
from .library_state import LibraryState
from .study_session import CramSessionStats, StudySession

__all__ = [
    "DEFAULT_DECK_COLOR",
    "NEW_CARD_DUE_OFFSET",
    "CramSessionStats",
    "Deck",
    "Flashcard",
    "LibraryState",
    "StudySession",
]
