"""DTOs for import and export."""

from dataclasses import dataclass, field
from enum import StrEnum

from flashdeck.domain.learning.services import ConflictRecord, ImportStrategy


class ImportStatus(StrEnum):
    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ImportOutcome:
    """Outcome of the most recent import attempt."""

    status: ImportStatus
    strategy: ImportStrategy | None = None
    imported_decks: int = 0
    imported_cards: int = 0
    skipped_cards: int = 0
    conflicts: list[ConflictRecord] = field(default_factory=list)
    error: str | None = None
