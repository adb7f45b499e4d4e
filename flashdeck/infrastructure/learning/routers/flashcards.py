"""API routes for flashcard management and review."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.flashcards import (
    CreateFlashcardUseCase,
    DeleteFlashcardUseCase,
    GetFlashcardsUseCase,
    ReviewFlashcardUseCase,
    UpdateFlashcardUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.learning.schemas import (
    CramStats,
    Flashcard,
    FlashcardCreateRequest,
    FlashcardDeleteResponse,
    FlashcardUpdateRequest,
    ReviewRequest,
    ReviewResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.post("", response_model=Flashcard, status_code=status.HTTP_201_CREATED)
def create_flashcard(
    request: FlashcardCreateRequest,
    use_case: CreateFlashcardUseCase = Depends(
        inject_use_case(container.create_flashcard_use_case)
    ),
) -> Flashcard:
    """
    Create a flashcard, due immediately.

    Args:
        request: Card content, optional deck id and language hints
        use_case: CreateFlashcardUseCase injected via dependency container

    Returns:
        Created flashcard
    """
    try:
        card = use_case.create_flashcard(
            front=request.front,
            back=request.back,
            deck_id=request.deck_id,
            front_language=request.front_language,
            back_language=request.back_language,
        )
        return Flashcard.from_domain(card)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def get_flashcard(
    flashcard_id: str,
    use_case: GetFlashcardsUseCase = Depends(inject_use_case(container.get_flashcards_use_case)),
) -> Flashcard:
    try:
        return Flashcard.from_domain(use_case.get_flashcard(flashcard_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{flashcard_id}", response_model=Flashcard, status_code=status.HTTP_200_OK)
def update_flashcard(
    flashcard_id: str,
    request: FlashcardUpdateRequest,
    use_case: UpdateFlashcardUseCase = Depends(
        inject_use_case(container.update_flashcard_use_case)
    ),
) -> Flashcard:
    """
    Replace a flashcard's content. Scheduling is left as it is.

    Raises:
        HTTPException: If flashcard not found or update fails
    """
    try:
        card = use_case.update_flashcard(
            flashcard_id=flashcard_id,
            front=request.front,
            back=request.back,
            front_language=request.front_language,
            back_language=request.back_language,
        )
        return Flashcard.from_domain(card)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{flashcard_id}", response_model=FlashcardDeleteResponse, status_code=status.HTTP_200_OK
)
def delete_flashcard(
    flashcard_id: str,
    use_case: DeleteFlashcardUseCase = Depends(
        inject_use_case(container.delete_flashcard_use_case)
    ),
) -> FlashcardDeleteResponse:
    """
    Delete a flashcard.

    Raises:
        HTTPException: If flashcard not found or deletion fails
    """
    try:
        use_case.delete_flashcard(flashcard_id)
        return FlashcardDeleteResponse(success=True, message="Flashcard deleted successfully")
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{flashcard_id}/review", response_model=ReviewResponse, status_code=status.HTTP_200_OK
)
def review_flashcard(
    flashcard_id: str,
    request: ReviewRequest,
    use_case: ReviewFlashcardUseCase = Depends(
        inject_use_case(container.review_flashcard_use_case)
    ),
) -> ReviewResponse:
    """
    Grade a flashcard.

    Outside cram mode the card is rescheduled; in cram mode only the
    session counters change.
    """
    try:
        outcome = use_case.review_flashcard(flashcard_id, request.grade, request.scale)
        return ReviewResponse(
            flashcard=Flashcard.from_domain(outcome.flashcard),
            grade=int(outcome.grade),
            grade_label=outcome.grade.label,
            cram=outcome.cram,
            cram_stats=CramStats.from_domain(outcome.cram_stats) if outcome.cram_stats else None,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to review flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
