"""Use case for collection and deck statistics."""

from datetime import tzinfo

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.lookups import deck_id_of
from flashdeck.domain.common.clock import Clock, utc_now
from flashdeck.domain.learning.services import stats_aggregator
from flashdeck.domain.learning.services.stats_aggregator import DeckStats, FlashcardStats
from flashdeck.exceptions import DeckNotFoundError


class GetStatsUseCase:
    """Use case for collection and deck statistics."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        clock: Clock = utc_now,
        tz: tzinfo | None = None,
    ) -> None:
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.clock = clock
        self.tz = tz

    def overall_stats(self) -> FlashcardStats:
        return stats_aggregator.overall_stats(
            self.flashcard_repository.find_all(), self.clock(), self.tz
        )

    def deck_stats(self, deck_id: str) -> DeckStats:
        """
        Stats for one deck.

        Raises:
            DeckNotFoundError: If the deck is not found
        """
        deck = self.deck_repository.find_by_id(deck_id_of(deck_id))
        if not deck:
            raise DeckNotFoundError(deck_id)
        return stats_aggregator.deck_stats(
            self.flashcard_repository.find_all(), deck, self.clock(), self.tz
        )

    def all_deck_stats(self) -> list[DeckStats]:
        cards = self.flashcard_repository.find_all()
        now = self.clock()
        return [
            stats_aggregator.deck_stats(cards, deck, now, self.tz)
            for deck in self.deck_repository.find_all()
        ]
