"""Mapper for Flashcard ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities import Flashcard
from flashdeck.infrastructure.learning.mappers.deck_mapper import as_utc
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            deck_id=DeckId(orm_model.deck_id),
            front=orm_model.front,
            back=orm_model.back,
            front_language=orm_model.front_language,
            back_language=orm_model.back_language,
            created_at=as_utc(orm_model.created_at),
            last_reviewed=as_utc(orm_model.last_reviewed) if orm_model.last_reviewed else None,
            next_review=as_utc(orm_model.next_review),
            interval=orm_model.interval,
            repetition=orm_model.repetition,
            efactor=orm_model.efactor,
        )

    def to_orm(
        self, domain_entity: Flashcard, owner_id: str, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        if orm_model is None:
            orm_model = FlashcardORM(id=domain_entity.id.value)

        orm_model.owner_id = owner_id
        orm_model.deck_id = domain_entity.deck_id.value
        orm_model.front = domain_entity.front
        orm_model.back = domain_entity.back
        orm_model.front_language = domain_entity.front_language
        orm_model.back_language = domain_entity.back_language
        orm_model.created_at = domain_entity.created_at
        orm_model.last_reviewed = domain_entity.last_reviewed
        orm_model.next_review = domain_entity.next_review
        orm_model.interval = domain_entity.interval
        orm_model.repetition = domain_entity.repetition
        orm_model.efactor = domain_entity.efactor
        return orm_model
