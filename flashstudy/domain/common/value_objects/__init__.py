"""Domain value objects."""

from .ids import FlashcardId

__all__ = ["FlashcardId"]
