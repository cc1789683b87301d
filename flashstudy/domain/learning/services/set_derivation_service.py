"""Domain service deriving sets from flashcards."""

from collections.abc import Iterable

from flashstudy.domain.learning.entities.flashcard import Flashcard
from flashstudy.domain.learning.entities.flashcard_set import FlashcardSet


class SetDerivationService:
    """Stateless domain service for grouping flashcards into sets."""

    @staticmethod
    def derive_sets(flashcards: Iterable[Flashcard]) -> list[FlashcardSet]:
        """
        Group flashcards by case-insensitive set name.

        The displayed name comes from the first flashcard seen for each group,
        ids are 1-based in encounter order, created_at is the earliest member
        created_at and card_count the number of members.

        Args:
            flashcards: Flashcards in storage order

        Returns:
            List of FlashcardSet, sorted ascending by created_at
        """
        grouped: dict[str, FlashcardSet] = {}

        for flashcard in flashcards:
            existing = grouped.get(flashcard.set_key)
            if existing is None:
                grouped[flashcard.set_key] = FlashcardSet(
                    id=len(grouped) + 1,
                    name=flashcard.set_name,
                    created_at=flashcard.created_at,
                )
                continue

            existing.card_count += 1
            if flashcard.created_at < existing.created_at:
                existing.created_at = flashcard.created_at

        # sorted() is stable, ties keep encounter order
        return sorted(grouped.values(), key=lambda s: s.created_at)
