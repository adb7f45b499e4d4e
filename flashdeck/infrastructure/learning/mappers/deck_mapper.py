"""Mapper for Deck ORM ↔ Domain conversion."""

from datetime import UTC, datetime

from flashdeck.domain.common.value_objects import DeckId
from flashdeck.domain.learning.entities import Deck
from flashdeck.models import Deck as DeckORM


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=UTC)


class DeckMapper:
    """Mapper for Deck ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: DeckORM) -> Deck:
        """Convert ORM model to domain entity."""
        return Deck.create_with_id(
            id=DeckId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
            color=orm_model.color,
            created_at=as_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Deck, owner_id: str, orm_model: DeckORM | None = None) -> DeckORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.owner_id = owner_id
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            orm_model.color = domain_entity.color
            orm_model.created_at = domain_entity.created_at
            return orm_model

        # Create new
        return DeckORM(
            id=domain_entity.id.value,
            owner_id=owner_id,
            name=domain_entity.name,
            description=domain_entity.description,
            color=domain_entity.color,
            created_at=domain_entity.created_at,
        )
