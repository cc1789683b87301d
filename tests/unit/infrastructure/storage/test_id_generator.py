"""Tests for CounterIdGenerator."""

import asyncio

import pytest

from flashstudy.infrastructure.storage.id_generator import CounterIdGenerator
from flashstudy.infrastructure.storage.key_value_store import TieredKeyValueStore

pytestmark = pytest.mark.anyio


class TestCounterIdGenerator:
    async def test_generate_starts_at_one(self, id_generator: CounterIdGenerator) -> None:
        assert await id_generator.generate_id("flashcard") == 1
        assert await id_generator.generate_id("flashcard") == 2

    async def test_counters_are_per_entity_type(
        self, id_generator: CounterIdGenerator, memory_store: TieredKeyValueStore
    ) -> None:
        await id_generator.generate_id("flashcard")
        await id_generator.generate_id("flashcard")

        assert await id_generator.generate_id("set") == 1
        assert await memory_store.get("counters") == {"flashcardId": 3, "setId": 2}

    async def test_unknown_entity_type_gets_new_counter(
        self, id_generator: CounterIdGenerator, memory_store: TieredKeyValueStore
    ) -> None:
        assert await id_generator.generate_id("deck") == 1
        assert (await memory_store.get("counters"))["deckId"] == 2

    async def test_reset_overwrites_counters(self, id_generator: CounterIdGenerator) -> None:
        await id_generator.reset({"flashcardId": 4, "setId": 1})

        assert await id_generator.generate_id("flashcard") == 4

    async def test_concurrent_generation_is_unique(
        self, id_generator: CounterIdGenerator
    ) -> None:
        ids = await asyncio.gather(*(id_generator.generate_id("flashcard") for _ in range(30)))

        assert sorted(ids) == list(range(1, 31))

    async def test_generation_through_redis(self, redis_store: TieredKeyValueStore) -> None:
        generator = CounterIdGenerator(redis_store)

        assert [await generator.generate_id("flashcard") for _ in range(3)] == [1, 2, 3]
        assert await redis_store.get("counters") == {"flashcardId": 4, "setId": 1}
        assert redis_store.fallback_count == 0
