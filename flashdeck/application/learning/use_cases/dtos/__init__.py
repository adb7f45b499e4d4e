"""DTOs for learning use cases."""

from .review_dtos import ReviewOutcome
from .study_dtos import StudySnapshot
from .sync_dtos import SyncStatus
from .transfer_dtos import ImportOutcome, ImportStatus

__all__ = [
    "ImportOutcome",
    "ImportStatus",
    "ReviewOutcome",
    "StudySnapshot",
    "SyncStatus",
]
