"""Learning bounded context: flashcards and the sets derived from them."""
