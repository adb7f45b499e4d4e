"""API routes for syncing with the external record store."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.dtos import SyncStatus
from flashdeck.application.learning.use_cases.sync import SyncLibraryUseCase
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.learning.schemas import SyncPullResponse, SyncStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sync", tags=["sync"])


@router.get("/status", response_model=SyncStatusResponse, status_code=status.HTTP_200_OK)
def get_sync_status(
    sync_status: SyncStatus = Depends(inject_use_case(container.sync_status)),
) -> SyncStatusResponse:
    return SyncStatusResponse.from_domain(sync_status)


@router.post("", response_model=SyncPullResponse, status_code=status.HTTP_200_OK)
async def pull_from_store(
    use_case: SyncLibraryUseCase = Depends(inject_use_case(container.sync_library_use_case)),
    sync_status: SyncStatus = Depends(inject_use_case(container.sync_status)),
) -> SyncPullResponse:
    """
    Merge the external store into local state, remote records winning.

    Raises:
        HTTPException: 503 if the store cannot be read; local state is kept
    """
    try:
        decks, flashcards = await use_case.pull()
        return SyncPullResponse(
            success=True,
            decks=decks,
            flashcards=flashcards,
            status=SyncStatusResponse.from_domain(sync_status),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to sync from record store: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
