"""Custom exception hierarchy for flashdeck."""


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class DeckNotFoundError(NotFoundError):
    """Deck not found error."""

    def __init__(self, deck_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with deck ID or custom message."""
        self.deck_id = deck_id
        if message:
            super().__init__(message)
        elif deck_id is not None:
            super().__init__(f"Deck with id {deck_id} not found")
        else:
            super().__init__("Deck not found")


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: str) -> None:
        """Initialize with flashcard ID."""
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")


class ValidationError(FlashdeckError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


class ImportValidationError(ValidationError):
    """Malformed import bundle, reported with the offending field."""

    def __init__(self, message: str, field: str | None = None, index: int | None = None) -> None:
        """
        Initialize with a field-level diagnostic.

        Args:
            message: Human readable reason, already naming deck/card position
            field: Bundle field that failed (e.g. "deckId")
            index: 1-based position of the offending deck or card
        """
        self.field = field
        self.index = index
        super().__init__(message, status_code=422)


class BundleFetchError(FlashdeckError):
    """Remote bundle could not be downloaded or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch bundle from {url}: {reason}", status_code=502)


class SyncError(FlashdeckError):
    """External record store rejected or failed an operation."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Sync {operation} failed: {reason}", status_code=503)
