"""Use case for flashcard CRUD operations."""

import structlog

from flashstudy.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashstudy.domain.common.value_objects import FlashcardId
from flashstudy.domain.learning.entities.flashcard import Flashcard
from flashstudy.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)


def _flashcard_id(flashcard_id: int) -> FlashcardId:
    # Assigned ids start at 1, anything else cannot exist
    if flashcard_id < 1:
        raise FlashcardNotFoundError(flashcard_id)
    return FlashcardId(flashcard_id)


class FlashcardUseCase:
    """Use case for flashcard CRUD operations."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    async def list_flashcards(self) -> list[Flashcard]:
        """Get all flashcards in insertion order."""
        return await self.flashcard_repository.list_all()

    async def get_flashcard(self, flashcard_id: int) -> Flashcard:
        """
        Get a single flashcard.

        Args:
            flashcard_id: ID of the flashcard

        Returns:
            Flashcard domain entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        flashcard = await self.flashcard_repository.find_by_id(_flashcard_id(flashcard_id))
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard

    async def create_flashcard(
        self, front: str, back: str, set_name: str | None = None
    ) -> Flashcard:
        """
        Create a new flashcard.

        Args:
            front: Front text, trimmed
            back: Back text, trimmed
            set_name: Set name, defaults to "General"

        Returns:
            Created flashcard domain entity

        Raises:
            ValidationError: If front or back is empty after trimming
        """
        # Validates before anything touches storage
        flashcard = Flashcard.create(front=front, back=back, set_name=set_name)
        flashcard = await self.flashcard_repository.add(flashcard)

        logger.info(
            "created_flashcard",
            flashcard_id=flashcard.id.value,
            set_name=flashcard.set_name,
        )
        return flashcard

    async def update_flashcard(
        self,
        flashcard_id: int,
        front: str | None = None,
        back: str | None = None,
        set_name: str | None = None,
    ) -> Flashcard:
        """
        Update a flashcard's front, back and/or set.

        Empty or omitted values keep the current value.

        Args:
            flashcard_id: ID of the flashcard to update
            front: New front text (optional)
            back: New back text (optional)
            set_name: New set name (optional)

        Returns:
            Updated flashcard domain entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        flashcard = await self.flashcard_repository.update(
            _flashcard_id(flashcard_id), front=front, back=back, set_name=set_name
        )

        logger.info("updated_flashcard", flashcard_id=flashcard_id)
        return flashcard

    async def delete_flashcard(self, flashcard_id: int) -> Flashcard:
        """
        Delete a flashcard.

        Args:
            flashcard_id: ID of the flashcard to delete

        Returns:
            The deleted flashcard

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        flashcard = await self.flashcard_repository.delete(_flashcard_id(flashcard_id))

        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
        return flashcard

    async def list_flashcards_by_set(self, set_name: str) -> list[Flashcard]:
        """Get the flashcards of a set, matched case-insensitively, in insertion order."""
        return await self.flashcard_repository.find_by_set(set_name)
