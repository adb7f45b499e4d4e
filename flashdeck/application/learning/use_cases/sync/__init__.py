"""Sync use cases."""

from .sync_library_use_case import SyncLibraryUseCase

__all__ = ["SyncLibraryUseCase"]
