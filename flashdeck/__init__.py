"""flashdeck - spaced-repetition flashcard study backend."""

__version__ = "0.1.0"
