"""Protocol for entity ID generation."""

from typing import Protocol


class IdGeneratorProtocol(Protocol):
    """Protocol for monotonic per-entity-type ID generation."""

    async def generate_id(self, entity_type: str) -> int:
        """
        Return the next ID for an entity type.

        Args:
            entity_type: Entity type name, e.g. "flashcard"

        Returns:
            A positive integer not returned before for that entity type
        """
        ...

    async def reset(self, counters: dict[str, int]) -> None:
        """Overwrite all counters."""
        ...
