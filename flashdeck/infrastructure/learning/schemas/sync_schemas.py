"""Pydantic schemas for sync endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.application.learning.use_cases.dtos import SyncStatus


class SyncStatusResponse(BaseModel):
    """Schema for the record store connection state."""

    is_online: bool
    is_syncing: bool
    last_sync: datetime | None
    error: str | None
    pending: int = Field(..., description="Store operations waiting in the outbox")

    @classmethod
    def from_domain(cls, status: SyncStatus) -> "SyncStatusResponse":
        return cls(
            is_online=status.is_online,
            is_syncing=status.is_syncing,
            last_sync=status.last_sync,
            error=status.error,
            pending=status.pending,
        )


class SyncPullResponse(BaseModel):
    """Schema for a completed pull."""

    success: bool
    decks: int = Field(..., description="Deck count after the merge")
    flashcards: int = Field(..., description="Card count after the merge")
    status: SyncStatusResponse
