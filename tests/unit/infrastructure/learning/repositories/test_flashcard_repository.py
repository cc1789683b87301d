"""Tests for FlashcardRepository."""

from datetime import UTC, datetime

import pytest

from flashstudy.domain.common.value_objects import FlashcardId
from flashstudy.domain.learning.entities.flashcard import Flashcard
from flashstudy.exceptions import FlashcardNotFoundError, SetAlreadyExistsError
from flashstudy.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from flashstudy.infrastructure.storage.id_generator import CounterIdGenerator
from flashstudy.infrastructure.storage.key_value_store import TieredKeyValueStore

pytestmark = pytest.mark.anyio

NOW = datetime(2024, 5, 1, 10, 0, tzinfo=UTC)


@pytest.fixture
def repository(memory_store: TieredKeyValueStore) -> FlashcardRepository:
    return FlashcardRepository(memory_store, CounterIdGenerator(memory_store))


def _new(front: str = "Q", back: str = "A", set_name: str | None = None) -> Flashcard:
    return Flashcard.create(front=front, back=back, set_name=set_name, now=NOW)


class TestAddFlashcard:
    async def test_add_assigns_sequential_ids(self, repository: FlashcardRepository) -> None:
        first = await repository.add(_new("Q1"))
        second = await repository.add(_new("Q2"))

        assert first.id == FlashcardId(1)
        assert second.id == FlashcardId(2)
        assert [f.front for f in await repository.list_all()] == ["Q1", "Q2"]

    async def test_add_stores_camel_case_record(
        self, repository: FlashcardRepository, memory_store: TieredKeyValueStore
    ) -> None:
        await repository.add(_new(set_name="Geografi"))

        assert await memory_store.get("flashcards") == [
            {
                "id": 1,
                "front": "Q",
                "back": "A",
                "set": "Geografi",
                "createdAt": "2024-05-01T10:00:00.000Z",
                "reviewCount": 0,
            }
        ]

    async def test_add_to_new_set_rejects_existing_name(
        self, repository: FlashcardRepository
    ) -> None:
        await repository.add(_new(set_name="Geografi"))

        with pytest.raises(SetAlreadyExistsError):
            await repository.add_to_new_set(_new(set_name="GEOGRAFI"))

        assert len(await repository.list_all()) == 1

    async def test_rejected_new_set_does_not_consume_an_id(
        self, repository: FlashcardRepository
    ) -> None:
        await repository.add(_new(set_name="Geografi"))

        with pytest.raises(SetAlreadyExistsError):
            await repository.add_to_new_set(_new(set_name="Geografi"))
        stored = await repository.add(_new())

        assert stored.id.value == 2

    async def test_add_to_new_set(self, repository: FlashcardRepository) -> None:
        stored = await repository.add_to_new_set(_new(set_name="Historie"))

        assert stored.id.is_assigned
        assert await repository.find_by_set("historie") == [stored]


class TestFindFlashcards:
    async def test_find_by_id(self, repository: FlashcardRepository) -> None:
        stored = await repository.add(_new("Q1"))

        found = await repository.find_by_id(stored.id)

        assert found is not None
        assert found.front == "Q1"
        assert await repository.find_by_id(FlashcardId(42)) is None

    async def test_find_by_set_keeps_insertion_order(
        self, repository: FlashcardRepository
    ) -> None:
        await repository.add(_new("Q1", set_name="Geografi"))
        await repository.add(_new("Q2", set_name="Matematik"))
        await repository.add(_new("Q3", set_name="geografi"))

        found = await repository.find_by_set("GEOGRAFI")

        assert [f.front for f in found] == ["Q1", "Q3"]

    async def test_legacy_record_without_set_is_general(
        self, repository: FlashcardRepository, memory_store: TieredKeyValueStore
    ) -> None:
        await memory_store.set(
            "flashcards",
            [{"id": 7, "front": "Q", "back": "A", "createdAt": "2024-05-01T10:00:00.000Z"}],
        )

        (flashcard,) = await repository.list_all()

        assert flashcard.set_name == "General"
        assert flashcard.review_count == 0


class TestUpdateFlashcard:
    async def test_update_merges_values(self, repository: FlashcardRepository) -> None:
        stored = await repository.add(_new("Q", "A", set_name="Geografi"))

        updated = await repository.update(stored.id, front="", back="X")

        assert updated.front == "Q"
        assert updated.back == "X"
        assert updated.set_name == "Geografi"
        assert updated.updated_at is not None

        reloaded = await repository.find_by_id(stored.id)
        assert reloaded is not None
        assert reloaded.back == "X"
        assert reloaded.updated_at == updated.updated_at

    async def test_update_unknown_id(self, repository: FlashcardRepository) -> None:
        with pytest.raises(FlashcardNotFoundError):
            await repository.update(FlashcardId(99), front="Q", back="A")


class TestDeleteFlashcard:
    async def test_delete_returns_removed(self, repository: FlashcardRepository) -> None:
        stored = await repository.add(_new("Q1"))
        await repository.add(_new("Q2"))

        deleted = await repository.delete(stored.id)

        assert deleted.front == "Q1"
        assert [f.front for f in await repository.list_all()] == ["Q2"]

    async def test_delete_unknown_id_leaves_collection(
        self, repository: FlashcardRepository
    ) -> None:
        await repository.add(_new())

        with pytest.raises(FlashcardNotFoundError):
            await repository.delete(FlashcardId(99))

        assert len(await repository.list_all()) == 1


class TestSeedIfEmpty:
    async def test_seeds_empty_collection(self, repository: FlashcardRepository) -> None:
        sample = Flashcard(
            id=FlashcardId(1), front="Q", back="A", set_name="Geografi", created_at=NOW
        )

        assert await repository.seed_if_empty([sample]) is True
        assert await repository.list_all() == [sample]

    async def test_does_not_touch_existing_collection(
        self, repository: FlashcardRepository
    ) -> None:
        await repository.add(_new("Mine"))
        sample = Flashcard(
            id=FlashcardId(1), front="Q", back="A", set_name="Geografi", created_at=NOW
        )

        assert await repository.seed_if_empty([sample]) is False
        assert [f.front for f in await repository.list_all()] == ["Mine"]


class TestRepositoryOnRedis:
    async def test_crud_through_redis(self, redis_store: TieredKeyValueStore) -> None:
        repository = FlashcardRepository(redis_store, CounterIdGenerator(redis_store))

        stored = await repository.add(_new("Q1", set_name="Geografi"))
        await repository.update(stored.id, front="Q1b", back="A")
        await repository.add(_new("Q2"))
        await repository.delete(stored.id)

        assert [f.front for f in await repository.list_all()] == ["Q2"]
        assert redis_store.fallback_count == 0
