"""Learning application layer: use cases over flashcards and derived sets."""
