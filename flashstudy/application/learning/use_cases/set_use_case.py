"""Use case for listing and creating flashcard sets."""

import structlog

from flashstudy.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashstudy.constants import PLACEHOLDER_BACK, PLACEHOLDER_FRONT_TEMPLATE
from flashstudy.domain.learning.entities.flashcard import Flashcard
from flashstudy.domain.learning.entities.flashcard_set import FlashcardSet
from flashstudy.domain.learning.services.set_derivation_service import SetDerivationService
from flashstudy.exceptions import SetAlreadyExistsError, ValidationError

logger = structlog.get_logger(__name__)


class SetUseCase:
    """
    Use case for flashcard sets.

    Sets are not stored. They are derived from the set names on flashcards,
    and creating a set means inserting a placeholder flashcard that carries
    the new name.
    """

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        set_derivation_service: SetDerivationService,
    ) -> None:
        """Initialize use case with repository protocols and domain services."""
        self.flashcard_repository = flashcard_repository
        self.set_derivation_service = set_derivation_service

    async def list_sets(self) -> list[FlashcardSet]:
        """
        Get all sets derived from the stored flashcards.

        Returns:
            List of FlashcardSet, sorted ascending by created_at
        """
        flashcards = await self.flashcard_repository.list_all()
        return self.set_derivation_service.derive_sets(flashcards)

    async def create_set(self, name: str, description: str | None = None) -> FlashcardSet:
        """
        Create a set by inserting a placeholder flashcard.

        Args:
            name: Set name, trimmed
            description: Optional description, trimmed

        Returns:
            The new set. Its id is the position it takes in list_sets(),
            the same id-assignment rule list_sets() uses.

        Raises:
            ValidationError: If name is empty after trimming
            SetAlreadyExistsError: If a set with the same name (any case) exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Set name is required", field="name")

        existing_sets = await self.list_sets()
        if any(s.key == name.lower() for s in existing_sets):
            raise SetAlreadyExistsError(name)

        placeholder = Flashcard.create(
            front=PLACEHOLDER_FRONT_TEMPLATE.format(name=name),
            back=PLACEHOLDER_BACK,
            set_name=name,
        )
        # Re-checks the name atomically with the insert
        placeholder = await self.flashcard_repository.add_to_new_set(placeholder)

        flashcard_set = FlashcardSet(
            id=len(existing_sets) + 1,
            name=name,
            description=(description or "").strip(),
            created_at=placeholder.created_at,
            card_count=1,
        )

        logger.info(
            "created_set",
            set_name=name,
            placeholder_flashcard_id=placeholder.id.value,
        )
        return flashcard_set
