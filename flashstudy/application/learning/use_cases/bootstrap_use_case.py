"""Use case for populating an empty store with sample flashcards."""

import structlog

from flashstudy.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashstudy.application.learning.protocols.id_generator import IdGeneratorProtocol
from flashstudy.constants import SAMPLE_COUNTERS, SAMPLE_FLASHCARDS
from flashstudy.domain.common.value_objects import FlashcardId
from flashstudy.domain.learning.entities.flashcard import Flashcard
from flashstudy.utils import utc_now

logger = structlog.get_logger(__name__)


class BootstrapUseCase:
    """Use case for seeding sample data."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        id_generator: IdGeneratorProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.id_generator = id_generator

    def sample_flashcards(self) -> list[Flashcard]:
        """Build the sample flashcards with fixed ids 1..n."""
        now = utc_now()
        return [
            Flashcard(
                id=FlashcardId(index),
                front=front,
                back=back,
                set_name=set_name,
                created_at=now,
            )
            for index, (front, back, set_name) in enumerate(SAMPLE_FLASHCARDS, start=1)
        ]

    async def ensure_sample_data(self) -> bool:
        """
        Store the sample flashcards if the collection is empty.

        Also resets the ID counters so the next flashcard id follows the
        sample ids.

        Returns:
            True if sample data was written
        """
        seeded = await self.flashcard_repository.seed_if_empty(self.sample_flashcards())
        if not seeded:
            return False

        await self.id_generator.reset(dict(SAMPLE_COUNTERS))
        logger.info("seeded_sample_flashcards", count=len(SAMPLE_FLASHCARDS))
        return True
