"""
Learning bounded context - Domain layer.

This context handles spaced-repetition study:
- Deck and flashcard lifecycle
- SuperMemo-2 scheduling
- Due-set selection, cram practice and statistics
- Reconciling imported bundles with the existing collection
"""
