"""Counter-based ID generation persisted through the key-value store."""

import structlog

from flashstudy.application.learning.protocols.key_value_store import KeyValueStoreProtocol
from flashstudy.constants import COUNTERS_KEY

logger = structlog.get_logger(__name__)


class CounterIdGenerator:
    """Monotonic per-entity-type counters kept in a single counters record."""

    def __init__(self, store: KeyValueStoreProtocol) -> None:
        self.store = store

    async def generate_id(self, entity_type: str) -> int:
        """
        Return the current counter for an entity type and advance it.

        The counters record is read and written back in one atomic store
        update, so concurrent callers on the same tier get distinct IDs.

        Args:
            entity_type: Entity type name; the counter field is "<entity_type>Id"

        Returns:
            The generated ID
        """
        field = f"{entity_type}Id"

        def take_next(counters: dict[str, int]) -> int:
            current = int(counters.get(field, 1))
            counters[field] = current + 1
            return current

        return await self.store.update(COUNTERS_KEY, take_next)

    async def reset(self, counters: dict[str, int]) -> None:
        """Overwrite the counters record."""
        await self.store.set(COUNTERS_KEY, dict(counters))
        logger.debug("reset_id_counters", counters=counters)
