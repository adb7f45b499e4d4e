"""Ports the learning use cases depend on."""

from .bundle_fetcher import BundleFetcherProtocol
from .deck_repository import DeckRepositoryProtocol
from .flashcard_repository import FlashcardRepositoryProtocol
from .record_store import RecordStoreProtocol
from .sync_queue import SyncQueueProtocol

__all__ = [
    "BundleFetcherProtocol",
    "DeckRepositoryProtocol",
    "FlashcardRepositoryProtocol",
    "RecordStoreProtocol",
    "SyncQueueProtocol",
]
