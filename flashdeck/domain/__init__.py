"""
Domain layer.

The domain layer contains the core study logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Decks and flashcards with identity and lifecycle
- Value Objects: Memory state, grades, strongly-typed ids
- Domain Services: Scheduling, due-set selection, stats, conflict resolution
"""
