"""Flashcard use cases."""

from .create_flashcard_use_case import CreateFlashcardUseCase
from .delete_flashcard_use_case import DeleteFlashcardUseCase
from .get_flashcards_use_case import GetFlashcardsUseCase
from .review_flashcard_use_case import ReviewFlashcardUseCase
from .update_flashcard_use_case import UpdateFlashcardUseCase

__all__ = [
    "CreateFlashcardUseCase",
    "DeleteFlashcardUseCase",
    "GetFlashcardsUseCase",
    "ReviewFlashcardUseCase",
    "UpdateFlashcardUseCase",
]
