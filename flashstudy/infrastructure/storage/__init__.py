"""Storage infrastructure: key-value store tiers and ID counters."""

from flashstudy.infrastructure.storage.id_generator import CounterIdGenerator
from flashstudy.infrastructure.storage.key_value_store import (
    MemoryKeyValueStore,
    TieredKeyValueStore,
)

__all__ = ["CounterIdGenerator", "MemoryKeyValueStore", "TieredKeyValueStore"]
