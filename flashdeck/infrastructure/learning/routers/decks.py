"""API routes for deck management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.decks import (
    CreateDeckUseCase,
    DeleteDeckUseCase,
    GetDecksUseCase,
    UpdateDeckUseCase,
)
from flashdeck.application.learning.use_cases.flashcards import GetFlashcardsUseCase
from flashdeck.application.learning.use_cases.study import GetStatsUseCase
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.entities import LibraryState
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.learning.schemas import (
    Deck,
    DeckCreateRequest,
    DeckDeleteResponse,
    DeckListResponse,
    DeckStatsResponse,
    DeckUpdateRequest,
    Flashcard,
    FlashcardListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


@router.get("", response_model=DeckListResponse, status_code=status.HTTP_200_OK)
def list_decks(
    use_case: GetDecksUseCase = Depends(inject_use_case(container.get_decks_use_case)),
    state: LibraryState = Depends(inject_use_case(container.state)),
) -> DeckListResponse:
    """List every deck in collection order, with the current selection."""
    try:
        decks = use_case.list_decks()
        selected = state.selected_deck_id
        return DeckListResponse(
            decks=[Deck.from_domain(d) for d in decks],
            selected_deck_id=selected.value if selected else None,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list decks: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=Deck, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: DeckCreateRequest,
    use_case: CreateDeckUseCase = Depends(inject_use_case(container.create_deck_use_case)),
) -> Deck:
    """
    Create a deck.

    Args:
        request: Name and optional description
        use_case: CreateDeckUseCase injected via dependency container

    Returns:
        Created deck
    """
    try:
        deck = use_case.create_deck(name=request.name, description=request.description)
        return Deck.from_domain(deck)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create deck: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{deck_id}", response_model=Deck, status_code=status.HTTP_200_OK)
def get_deck(
    deck_id: str,
    use_case: GetDecksUseCase = Depends(inject_use_case(container.get_decks_use_case)),
) -> Deck:
    try:
        return Deck.from_domain(use_case.get_deck(deck_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.patch("/{deck_id}", response_model=Deck, status_code=status.HTTP_200_OK)
def update_deck(
    deck_id: str,
    request: DeckUpdateRequest,
    use_case: UpdateDeckUseCase = Depends(inject_use_case(container.update_deck_use_case)),
) -> Deck:
    """
    Update a deck's name, description and/or color.

    Raises:
        HTTPException: If the deck is not found or the update fails
    """
    try:
        deck = use_case.update_deck(
            deck_id=deck_id,
            name=request.name,
            description=request.description,
            color=request.color,
        )
        return Deck.from_domain(deck)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{deck_id}", response_model=DeckDeleteResponse, status_code=status.HTTP_200_OK)
def delete_deck(
    deck_id: str,
    use_case: DeleteDeckUseCase = Depends(inject_use_case(container.delete_deck_use_case)),
) -> DeckDeleteResponse:
    """
    Delete a deck and all of its cards.

    Raises:
        HTTPException: If the deck is not found or deletion fails
    """
    try:
        removed = use_case.delete_deck(deck_id)
        return DeckDeleteResponse(
            success=True, message="Deck deleted successfully", removed_cards=removed
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{deck_id}/stats", response_model=DeckStatsResponse, status_code=status.HTTP_200_OK)
def get_deck_stats(
    deck_id: str,
    use_case: GetStatsUseCase = Depends(inject_use_case(container.get_stats_use_case)),
) -> DeckStatsResponse:
    """Totals, due count, reviews today and average efactor for one deck."""
    try:
        return DeckStatsResponse.from_domain(use_case.deck_stats(deck_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute stats for deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{deck_id}/flashcards", response_model=FlashcardListResponse, status_code=status.HTTP_200_OK
)
def list_deck_flashcards(
    deck_id: str,
    use_case: GetFlashcardsUseCase = Depends(inject_use_case(container.get_flashcards_use_case)),
) -> FlashcardListResponse:
    """List the cards of one deck, due or not."""
    try:
        cards = use_case.list_flashcards(deck_id)
        return FlashcardListResponse(flashcards=[Flashcard.from_domain(c) for c in cards])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcards for deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
