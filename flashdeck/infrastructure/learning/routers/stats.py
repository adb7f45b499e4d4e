"""API routes for collection statistics."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.study import GetStatsUseCase
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.learning.schemas import DeckStatsResponse, StatsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse, status_code=status.HTTP_200_OK)
def get_stats(
    use_case: GetStatsUseCase = Depends(inject_use_case(container.get_stats_use_case)),
) -> StatsResponse:
    """Overall totals plus a breakdown per deck."""
    try:
        decks = [DeckStatsResponse.from_domain(s) for s in use_case.all_deck_stats()]
        return StatsResponse.from_domain(use_case.overall_stats(), decks)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute stats: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
