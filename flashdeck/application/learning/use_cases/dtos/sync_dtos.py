"""DTOs for sync."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class SyncStatus:
    """Connection state with the external record store."""

    is_online: bool = True
    is_syncing: bool = False
    last_sync: datetime | None = None
    error: str | None = None
    pending: int = 0

    def mark_syncing(self) -> None:
        self.is_syncing = True

    def mark_synced(self, at: datetime) -> None:
        self.is_online = True
        self.is_syncing = False
        self.last_sync = at
        self.error = None

    def mark_failed(self, error: str) -> None:
        self.is_online = False
        self.is_syncing = False
        self.error = error
