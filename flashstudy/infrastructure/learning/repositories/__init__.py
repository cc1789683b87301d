from flashstudy.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)

__all__ = ["FlashcardRepository"]
