"""API routes for the study session."""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.dtos import StudySnapshot
from flashdeck.application.learning.use_cases.study import StudySessionUseCase
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.learning.schemas import StudySnapshotResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/study", tags=["study"])

StudyUseCase = Depends(inject_use_case(container.study_session_use_case))


def _respond(action: str, run: Callable[[], StudySnapshot]) -> StudySnapshotResponse:
    try:
        return StudySnapshotResponse.from_domain(run())
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to {action}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=StudySnapshotResponse, status_code=status.HTTP_200_OK)
def get_study_state(use_case: StudySessionUseCase = StudyUseCase) -> StudySnapshotResponse:
    """Selected deck, current card and cram counters, evaluated now."""
    return _respond("read study state", use_case.snapshot)


@router.post(
    "/select/{deck_id}", response_model=StudySnapshotResponse, status_code=status.HTTP_200_OK
)
def select_deck(
    deck_id: str, use_case: StudySessionUseCase = StudyUseCase
) -> StudySnapshotResponse:
    """Study a different deck, restarting at its first card."""
    return _respond(f"select deck {deck_id}", lambda: use_case.select_deck(deck_id))


@router.post("/next", response_model=StudySnapshotResponse, status_code=status.HTTP_200_OK)
def next_card(use_case: StudySessionUseCase = StudyUseCase) -> StudySnapshotResponse:
    return _respond("advance to next card", use_case.next_card)


@router.post("/previous", response_model=StudySnapshotResponse, status_code=status.HTTP_200_OK)
def previous_card(use_case: StudySessionUseCase = StudyUseCase) -> StudySnapshotResponse:
    return _respond("go back to previous card", use_case.previous_card)


@router.post("/cram", response_model=StudySnapshotResponse, status_code=status.HTTP_200_OK)
def toggle_cram_mode(use_case: StudySessionUseCase = StudyUseCase) -> StudySnapshotResponse:
    """Switch between due-only review and cram practice over the whole deck."""
    return _respond("toggle cram mode", use_case.toggle_cram_mode)


@router.post("/cram/reset", response_model=StudySnapshotResponse, status_code=status.HTTP_200_OK)
def reset_cram_session(
    use_case: StudySessionUseCase = StudyUseCase,
) -> StudySnapshotResponse:
    return _respond("reset cram session", use_case.reset_cram_session)
