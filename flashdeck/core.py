import random

from dependency_injector import containers, providers

from flashdeck.application.learning.services import BundleProcessor, BundleValidator
from flashdeck.application.learning.use_cases.decks import (
    CreateDeckUseCase,
    DeleteDeckUseCase,
    GetDecksUseCase,
    UpdateDeckUseCase,
)
from flashdeck.application.learning.use_cases.dtos import SyncStatus
from flashdeck.application.learning.use_cases.flashcards import (
    CreateFlashcardUseCase,
    DeleteFlashcardUseCase,
    GetFlashcardsUseCase,
    ReviewFlashcardUseCase,
    UpdateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.study import GetStatsUseCase, StudySessionUseCase
from flashdeck.application.learning.use_cases.sync import SyncLibraryUseCase
from flashdeck.application.learning.use_cases.transfer import (
    ExportBundleUseCase,
    ImportBundleUseCase,
)
from flashdeck.config import get_settings
from flashdeck.database import get_session_factory
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.domain.learning.services import ConflictResolver, Sm2Scheduler
from flashdeck.infrastructure.learning.bundle import HttpBundleFetcher
from flashdeck.infrastructure.learning.repositories import DeckRepository, FlashcardRepository
from flashdeck.infrastructure.learning.snapshot import JsonSnapshotRepository
from flashdeck.infrastructure.learning.store import SqlAlchemyRecordStore
from flashdeck.infrastructure.learning.sync import SyncOutbox


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # The one owned library state of this instance
    state = providers.Singleton(LibraryState)
    rng = providers.ThreadSafeSingleton(random.Random)

    # External collaborators
    session_factory = providers.Singleton(get_session_factory)
    record_store = providers.Singleton(SqlAlchemyRecordStore, session_factory=session_factory)
    sync_status = providers.Singleton(SyncStatus)
    sync_outbox = providers.Singleton(
        SyncOutbox,
        record_store=record_store,
        owner_id=settings.provided.OWNER_ID,
        status=sync_status,
        max_retries=settings.provided.SYNC_MAX_RETRIES,
        retry_delay=settings.provided.SYNC_RETRY_DELAY_SECONDS,
        enabled=settings.provided.SYNC_ENABLED,
    )
    bundle_fetcher = providers.Singleton(
        HttpBundleFetcher, timeout=settings.provided.IMPORT_FETCH_TIMEOUT_SECONDS
    )
    snapshot_repository = providers.Singleton(
        JsonSnapshotRepository, path=settings.provided.STATE_FILE
    )

    # Repositories
    deck_repository = providers.Factory(DeckRepository, state=state)
    flashcard_repository = providers.Factory(FlashcardRepository, state=state)

    # Domain and application services (pure logic)
    scheduler = providers.ThreadSafeSingleton(Sm2Scheduler)
    conflict_resolver = providers.Factory(ConflictResolver)
    bundle_validator = providers.Factory(BundleValidator)
    bundle_processor = providers.Factory(
        BundleProcessor, default_color=settings.provided.DEFAULT_DECK_COLOR
    )

    # Deck use cases
    create_deck_use_case = providers.Factory(
        CreateDeckUseCase,
        state=state,
        deck_repository=deck_repository,
        sync_queue=sync_outbox,
        palette=settings.provided.DECK_COLOR_PALETTE,
        rng=rng,
    )
    update_deck_use_case = providers.Factory(
        UpdateDeckUseCase,
        state=state,
        deck_repository=deck_repository,
        sync_queue=sync_outbox,
    )
    delete_deck_use_case = providers.Factory(
        DeleteDeckUseCase,
        state=state,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        sync_queue=sync_outbox,
    )
    get_decks_use_case = providers.Factory(GetDecksUseCase, deck_repository=deck_repository)

    # Flashcard use cases
    create_flashcard_use_case = providers.Factory(
        CreateFlashcardUseCase,
        state=state,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        sync_queue=sync_outbox,
    )
    update_flashcard_use_case = providers.Factory(
        UpdateFlashcardUseCase,
        state=state,
        flashcard_repository=flashcard_repository,
        sync_queue=sync_outbox,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        state=state,
        flashcard_repository=flashcard_repository,
        sync_queue=sync_outbox,
    )
    get_flashcards_use_case = providers.Factory(
        GetFlashcardsUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
    )
    review_flashcard_use_case = providers.Factory(
        ReviewFlashcardUseCase,
        state=state,
        flashcard_repository=flashcard_repository,
        sync_queue=sync_outbox,
        scheduler=scheduler,
    )

    # Study use cases
    study_session_use_case = providers.Factory(
        StudySessionUseCase,
        state=state,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
    )
    get_stats_use_case = providers.Factory(
        GetStatsUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
    )

    # Transfer use cases; import keeps its status between requests
    export_bundle_use_case = providers.Factory(
        ExportBundleUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
    )
    import_bundle_use_case = providers.ThreadSafeSingleton(
        ImportBundleUseCase,
        state=state,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        sync_queue=sync_outbox,
        fetcher=bundle_fetcher,
        validator=bundle_validator,
        processor=bundle_processor,
        resolver=conflict_resolver,
        fetch_timeout=settings.provided.IMPORT_FETCH_TIMEOUT_SECONDS,
    )

    # Sync use cases
    sync_library_use_case = providers.Factory(
        SyncLibraryUseCase,
        state=state,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        record_store=record_store,
        sync_queue=sync_outbox,
        sync_status=sync_status,
        owner_id=settings.provided.OWNER_ID,
    )


# Initialize container
container = Container()
