from flashstudy.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper

__all__ = ["FlashcardMapper"]
