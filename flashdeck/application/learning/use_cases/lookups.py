"""Id parsing for use case entry points."""

from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.exceptions import DeckNotFoundError, FlashcardNotFoundError


def deck_id_of(deck_id: str) -> DeckId:
    """Wrap a caller-supplied deck id; a blank one can never resolve."""
    try:
        return DeckId(deck_id)
    except ValueError as e:
        raise DeckNotFoundError(deck_id) from e


def flashcard_id_of(flashcard_id: str) -> FlashcardId:
    """Wrap a caller-supplied flashcard id; a blank one can never resolve."""
    try:
        return FlashcardId(flashcard_id)
    except ValueError as e:
        raise FlashcardNotFoundError(flashcard_id) from e
