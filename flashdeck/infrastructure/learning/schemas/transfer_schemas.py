"""Pydantic schemas for import/export endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from flashdeck.application.learning.use_cases.dtos import ImportOutcome
from flashdeck.domain.learning.services import ImportStrategy


class ImportRequest(BaseModel):
    """Schema for importing an uploaded bundle."""

    # Validated field by field by the import engine, not here
    bundle: Any = Field(..., description="Decoded bundle document")
    strategy: ImportStrategy | None = Field(
        None, description="skip, rename or replace; server default when omitted"
    )


class RemoteImportRequest(BaseModel):
    """Schema for importing a bundle from a URL."""

    url: str = Field(..., min_length=1, description="Location of the bundle JSON")
    strategy: ImportStrategy | None = Field(None, description="skip, rename or replace")
    timeout: float | None = Field(None, gt=0, description="Download timeout in seconds")


class ConflictItem(BaseModel):
    """Schema for one conflict record."""

    type: Literal["deck", "card"]
    name: str
    action: str


class ImportResponse(BaseModel):
    """Schema for a finished import."""

    success: bool
    imported_decks: int
    imported_cards: int
    skipped_cards: int
    conflicts: list[ConflictItem]

    @classmethod
    def from_domain(cls, outcome: ImportOutcome) -> "ImportResponse":
        return cls(
            success=True,
            imported_decks=outcome.imported_decks,
            imported_cards=outcome.imported_cards,
            skipped_cards=outcome.skipped_cards,
            conflicts=[
                ConflictItem(type=c.type, name=c.name, action=c.action) for c in outcome.conflicts
            ],
        )


class ImportStatusResponse(BaseModel):
    """Schema for the state of the most recent import."""

    status: str = Field(..., description="idle, processing, success or error")
    strategy: ImportStrategy | None
    imported_decks: int
    imported_cards: int
    skipped_cards: int
    conflicts: list[ConflictItem]
    error: str | None

    @classmethod
    def from_domain(cls, outcome: ImportOutcome) -> "ImportStatusResponse":
        return cls(
            status=str(outcome.status),
            strategy=outcome.strategy,
            imported_decks=outcome.imported_decks,
            imported_cards=outcome.imported_cards,
            skipped_cards=outcome.skipped_cards,
            conflicts=[
                ConflictItem(type=c.type, name=c.name, action=c.action) for c in outcome.conflicts
            ],
            error=outcome.error,
        )
