"""Use case for importing a JSON bundle into the collection."""

import asyncio

import structlog

from flashdeck.application.learning.protocols.bundle_fetcher import BundleFetcherProtocol
from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.sync_queue import SyncQueueProtocol
from flashdeck.application.learning.services import BundleProcessor, BundleValidator
from flashdeck.application.learning.use_cases.dtos import ImportOutcome, ImportStatus
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.domain.learning.services import ConflictResolver, ImportStrategy
from flashdeck.exceptions import BundleFetchError, FlashdeckError

logger = structlog.get_logger(__name__)


class ImportBundleUseCase:
    """
    Validate, merge and apply an import bundle.

    Either the whole merge is applied in one step or nothing changes.
    Status moves IDLE -> PROCESSING -> SUCCESS | ERROR and the outcome of
    the last attempt stays readable through ``last_outcome``.
    """

    def __init__(
        self,
        state: LibraryState,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        sync_queue: SyncQueueProtocol,
        fetcher: BundleFetcherProtocol,
        validator: BundleValidator,
        processor: BundleProcessor,
        resolver: ConflictResolver,
        fetch_timeout: float = 30.0,
    ) -> None:
        self.state = state
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.sync_queue = sync_queue
        self.fetcher = fetcher
        self.validator = validator
        self.processor = processor
        self.resolver = resolver
        self.fetch_timeout = fetch_timeout
        self.last_outcome = ImportOutcome(status=ImportStatus.IDLE)

    @property
    def status(self) -> ImportStatus:
        return self.last_outcome.status

    def import_payload(
        self, payload: object, strategy: ImportStrategy = ImportStrategy.RENAME
    ) -> ImportOutcome:
        """
        Import an already decoded bundle.

        Args:
            payload: Decoded JSON document
            strategy: How to treat decks and cards that match existing ones

        Returns:
            ImportOutcome with counts and the ordered conflict records

        Raises:
            ImportValidationError: If the bundle is malformed; nothing is applied
        """
        self.last_outcome = ImportOutcome(status=ImportStatus.PROCESSING, strategy=strategy)
        try:
            self.validator.validate(payload)
            import_decks, import_cards = self.processor.to_entities(payload)  # type: ignore[arg-type]

            with self.state.lock:
                result = self.resolver.resolve(
                    self.deck_repository.find_all(),
                    self.flashcard_repository.find_all(),
                    import_decks,
                    import_cards,
                    strategy,
                )
                self.state.replace_collection(result.decks, result.flashcards)
        except (FlashdeckError, DomainError) as e:
            self._fail(strategy, e.message)
            raise
        except Exception as e:
            self._fail(strategy, f"Unexpected import failure: {e!s}")
            raise

        self.sync_queue.sync_all(result.decks, result.flashcards)
        self.last_outcome = ImportOutcome(
            status=ImportStatus.SUCCESS,
            strategy=strategy,
            imported_decks=result.imported_decks,
            imported_cards=result.imported_cards,
            skipped_cards=result.skipped_cards,
            conflicts=result.conflicts,
        )
        logger.info(
            "imported_bundle",
            strategy=str(strategy),
            imported_decks=result.imported_decks,
            imported_cards=result.imported_cards,
            skipped_cards=result.skipped_cards,
            conflicts=len(result.conflicts),
        )
        return self.last_outcome

    async def import_from_url(
        self,
        url: str,
        strategy: ImportStrategy = ImportStrategy.RENAME,
        timeout: float | None = None,
    ) -> ImportOutcome:
        """
        Download a bundle and import it.

        The download is the only suspension point. It is bounded by
        ``timeout`` (or the configured default) and can be cancelled; in
        both cases the collection is left as it was.

        Raises:
            BundleFetchError: On timeout or transport failure
            ImportValidationError: If the downloaded bundle is malformed
        """
        self.last_outcome = ImportOutcome(status=ImportStatus.PROCESSING, strategy=strategy)
        limit = self.fetch_timeout if timeout is None else timeout
        try:
            async with asyncio.timeout(limit):
                payload = await self.fetcher.fetch(url)
        except TimeoutError as e:
            error = BundleFetchError(url, f"timed out after {limit}s")
            self._fail(strategy, error.message)
            raise error from e
        except asyncio.CancelledError:
            self._fail(strategy, "Import cancelled")
            raise
        except FlashdeckError as e:
            self._fail(strategy, e.message)
            raise

        logger.info("fetched_remote_bundle", url=url)
        return self.import_payload(payload, strategy)

    def _fail(self, strategy: ImportStrategy, message: str) -> None:
        self.last_outcome = ImportOutcome(
            status=ImportStatus.ERROR, strategy=strategy, error=message
        )
        logger.warning("import_failed", strategy=str(strategy), error=message)
