"""Protocol for Flashcard repository in learning context."""

from collections.abc import Sequence
from typing import Protocol

from flashstudy.domain.common.value_objects import FlashcardId
from flashstudy.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    async def list_all(self) -> list[Flashcard]:
        """
        Get all flashcards.

        Returns:
            List of flashcard entities in insertion order
        """
        ...

    async def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        ...

    async def find_by_set(self, set_name: str) -> list[Flashcard]:
        """
        Get all flashcards of a set.

        Args:
            set_name: Set name, matched case-insensitively

        Returns:
            List of flashcard entities in insertion order
        """
        ...

    async def add(self, flashcard: Flashcard) -> Flashcard:
        """
        Assign an ID to a new flashcard and append it.

        Args:
            flashcard: The unsaved flashcard entity

        Returns:
            Stored flashcard entity with its assigned ID
        """
        ...

    async def add_to_new_set(self, flashcard: Flashcard) -> Flashcard:
        """
        Append a flashcard only if no stored flashcard shares its set name.

        Raises:
            SetAlreadyExistsError: If the set is already derivable
        """
        ...

    async def update(
        self,
        flashcard_id: FlashcardId,
        front: str | None = None,
        back: str | None = None,
        set_name: str | None = None,
    ) -> Flashcard:
        """
        Merge non-empty values over a stored flashcard.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        ...

    async def delete(self, flashcard_id: FlashcardId) -> Flashcard:
        """
        Remove a flashcard.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        ...

    async def seed_if_empty(self, flashcards: Sequence[Flashcard]) -> bool:
        """
        Store flashcards only when the collection is empty.

        Returns:
            True if the flashcards were stored
        """
        ...
