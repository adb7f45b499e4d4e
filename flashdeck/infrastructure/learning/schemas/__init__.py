"""Pydantic schemas for the learning API."""

from .cram_schemas import CramStats
from .deck_schemas import (
    Deck,
    DeckCreateRequest,
    DeckDeleteResponse,
    DeckListResponse,
    DeckStatsResponse,
    DeckUpdateRequest,
)
from .flashcard_schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardDeleteResponse,
    FlashcardListResponse,
    FlashcardUpdateRequest,
    ReviewRequest,
    ReviewResponse,
)
from .study_schemas import StatsResponse, StudySnapshotResponse
from .sync_schemas import SyncPullResponse, SyncStatusResponse
from .transfer_schemas import (
    ConflictItem,
    ImportRequest,
    ImportResponse,
    ImportStatusResponse,
    RemoteImportRequest,
)

__all__ = [
    "ConflictItem",
    "CramStats",
    "Deck",
    "DeckCreateRequest",
    "DeckDeleteResponse",
    "DeckListResponse",
    "DeckStatsResponse",
    "DeckUpdateRequest",
    "Flashcard",
    "FlashcardCreateRequest",
    "FlashcardDeleteResponse",
    "FlashcardListResponse",
    "FlashcardUpdateRequest",
    "ImportRequest",
    "ImportResponse",
    "ImportStatusResponse",
    "RemoteImportRequest",
    "ReviewRequest",
    "ReviewResponse",
    "StatsResponse",
    "StudySnapshotResponse",
    "SyncPullResponse",
    "SyncStatusResponse",
]
