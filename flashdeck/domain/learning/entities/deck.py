"""Deck entity grouping flashcards."""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.clock import to_millis, utc_now
from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import DeckId

DEFAULT_DECK_COLOR = "bg-blue-500"


@dataclass(eq=False)
class Deck(Entity[DeckId]):
    """
    Named collection of flashcards.

    Business Rules:
    - Name cannot be empty
    - Deleting a deck deletes every card it owns
    """

    id: DeckId
    name: str
    color: str
    created_at: datetime
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise DomainError("Deck name cannot be empty")

    def update_details(
        self,
        name: str | None = None,
        description: str | None = None,
        color: str | None = None,
    ) -> None:
        """
        Update deck metadata. Fields left as None keep their value.

        Raises:
            DomainError: If the new name is empty
        """
        if name is not None:
            if not name.strip():
                raise DomainError("Deck name cannot be empty")
            self.name = name.strip()
        if description is not None:
            self.description = description.strip() or None
        if color is not None:
            self.color = color

    @classmethod
    def create(
        cls,
        name: str,
        color: str,
        description: str | None = None,
        now: datetime | None = None,
    ) -> "Deck":
        """Create a new deck with a fresh id."""
        return cls(
            id=DeckId.generate(),
            name=name.strip(),
            description=description.strip() if description and description.strip() else None,
            color=color,
            created_at=to_millis(now) if now else utc_now(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        name: str,
        color: str,
        created_at: datetime,
        description: str | None = None,
    ) -> "Deck":
        """Reconstitute a deck from persistence or an import bundle."""
        return cls(
            id=id,
            name=name,
            description=description,
            color=color,
            created_at=created_at,
        )
