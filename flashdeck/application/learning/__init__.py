"""Learning application module: decks, flashcards, study, transfer and sync."""
