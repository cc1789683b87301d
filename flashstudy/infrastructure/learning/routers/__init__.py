from flashstudy.infrastructure.learning.routers import flashcards, sets

__all__ = ["flashcards", "sets"]
