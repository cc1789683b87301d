from .flashcard import Flashcard
from .flashcard_set import FlashcardSet

__all__ = ["Flashcard", "FlashcardSet"]
