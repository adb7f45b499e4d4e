"""
Domain service reconciling an imported bundle with the existing collection.

This is a pure domain service with no infrastructure dependencies.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Literal

from flashdeck.domain.common.value_objects import DeckId, FlashcardId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.domain.learning.entities.flashcard import Flashcard

IMPORTED_SUFFIX = " (Imported)"
CONFLICT_NAME_LENGTH = 50


class ImportStrategy(StrEnum):
    """How to treat an incoming deck or card that matches an existing one."""

    SKIP = "skip"
    RENAME = "rename"
    REPLACE = "replace"


@dataclass(frozen=True)
class ConflictRecord:
    """One user-facing line describing how a conflict was handled."""

    type: Literal["deck", "card"]
    name: str
    action: str


@dataclass
class MergeResult:
    """Final collection after conflict resolution."""

    decks: list[Deck]
    flashcards: list[Flashcard]
    conflicts: list[ConflictRecord] = field(default_factory=list)
    imported_decks: int = 0
    imported_cards: int = 0
    skipped_cards: int = 0


class ConflictResolver:
    """
    Merge imported decks and cards into an existing collection.

    Decks are resolved first and match on exact name. Cards are resolved
    second, after their deck id has been remapped, and match on exact
    front text within the resolved deck. Matching is always against the
    collection as it was before the import.
    """

    def resolve(
        self,
        existing_decks: Sequence[Deck],
        existing_cards: Sequence[Flashcard],
        import_decks: Sequence[Deck],
        import_cards: Sequence[Flashcard],
        strategy: ImportStrategy = ImportStrategy.RENAME,
    ) -> MergeResult:
        """
        Resolve conflicts under the given strategy.

        Args:
            existing_decks: Decks currently in the collection
            existing_cards: Cards currently in the collection
            import_decks: Decks from the bundle
            import_cards: Cards from the bundle
            strategy: skip, rename or replace

        Returns:
            MergeResult with the final decks and cards and the ordered
            list of conflict records
        """
        result = MergeResult(decks=[], flashcards=[])
        final_decks: dict[DeckId, Deck] = {deck.id: deck for deck in existing_decks}
        final_cards: dict[FlashcardId, Flashcard] = {card.id: card for card in existing_cards}

        deck_id_mapping = self._merge_decks(
            existing_decks, import_decks, strategy, final_decks, result
        )
        self._merge_cards(
            existing_cards, import_cards, strategy, deck_id_mapping, final_cards, result
        )

        result.decks = list(final_decks.values())
        result.flashcards = list(final_cards.values())
        return result

    def _merge_decks(
        self,
        existing_decks: Sequence[Deck],
        import_decks: Sequence[Deck],
        strategy: ImportStrategy,
        final_decks: dict[DeckId, Deck],
        result: MergeResult,
    ) -> dict[DeckId, DeckId]:
        by_name: dict[str, Deck] = {}
        for deck in existing_decks:
            by_name.setdefault(deck.name, deck)

        mapping: dict[DeckId, DeckId] = {}
        for incoming in import_decks:
            existing = by_name.get(incoming.name)

            if existing is None:
                deck = incoming
                if deck.id in final_decks:
                    deck = replace(incoming, id=DeckId.generate())
                final_decks[deck.id] = deck
                mapping[incoming.id] = deck.id
                result.imported_decks += 1
                continue

            if strategy is ImportStrategy.SKIP:
                mapping[incoming.id] = existing.id
                result.conflicts.append(ConflictRecord("deck", incoming.name, "skipped"))
            elif strategy is ImportStrategy.RENAME:
                new_name = f"{incoming.name}{IMPORTED_SUFFIX}"
                renamed = replace(incoming, id=DeckId.generate(), name=new_name)
                final_decks[renamed.id] = renamed
                mapping[incoming.id] = renamed.id
                result.imported_decks += 1
                result.conflicts.append(
                    ConflictRecord("deck", incoming.name, f'renamed to "{new_name}"')
                )
            else:
                final_decks[existing.id] = replace(incoming, id=existing.id)
                mapping[incoming.id] = existing.id
                result.imported_decks += 1
                result.conflicts.append(ConflictRecord("deck", incoming.name, "replaced"))

        return mapping

    def _merge_cards(
        self,
        existing_cards: Sequence[Flashcard],
        import_cards: Sequence[Flashcard],
        strategy: ImportStrategy,
        deck_id_mapping: dict[DeckId, DeckId],
        final_cards: dict[FlashcardId, Flashcard],
        result: MergeResult,
    ) -> None:
        by_key: dict[tuple[str, DeckId], Flashcard] = {}
        for card in existing_cards:
            by_key.setdefault((card.front, card.deck_id), card)

        for incoming in import_cards:
            label = incoming.front[:CONFLICT_NAME_LENGTH]
            target_deck_id = deck_id_mapping.get(incoming.deck_id)

            if target_deck_id is None:
                result.skipped_cards += 1
                result.conflicts.append(
                    ConflictRecord("card", label, "skipped (deck not imported)")
                )
                continue

            card = replace(incoming, deck_id=target_deck_id)
            existing = by_key.get((card.front, target_deck_id))

            if existing is None:
                if card.id in final_cards:
                    card = replace(card, id=FlashcardId.generate())
                final_cards[card.id] = card
                result.imported_cards += 1
                continue

            if strategy is ImportStrategy.SKIP:
                result.conflicts.append(ConflictRecord("card", label, "skipped"))
            elif strategy is ImportStrategy.RENAME:
                duplicate = replace(card, id=FlashcardId.generate())
                final_cards[duplicate.id] = duplicate
                result.imported_cards += 1
                result.conflicts.append(ConflictRecord("card", label, "imported as duplicate"))
            else:
                final_cards[existing.id] = replace(card, id=existing.id)
                result.imported_cards += 1
                result.conflicts.append(ConflictRecord("card", label, "replaced"))
