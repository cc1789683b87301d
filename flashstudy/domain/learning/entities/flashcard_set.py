"""
Flashcard set, a view derived from the set names on flashcards.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class FlashcardSet:
    """
    Named grouping of flashcards.

    Sets have no storage record of their own. They are recomputed from the
    flashcards on every read, so `id` is only the 1-based position in which
    the set was first encountered and is not stable when flashcards change.
    """

    id: int
    name: str
    created_at: datetime
    card_count: int = 1
    description: str = ""

    @property
    def key(self) -> str:
        return self.name.lower()
