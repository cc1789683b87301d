"""Tests for BootstrapUseCase."""

import pytest

from flashstudy.application.learning.use_cases.bootstrap_use_case import BootstrapUseCase
from flashstudy.domain.learning.entities.flashcard import Flashcard
from flashstudy.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from flashstudy.infrastructure.storage.id_generator import CounterIdGenerator
from flashstudy.infrastructure.storage.key_value_store import TieredKeyValueStore

pytestmark = pytest.mark.anyio


@pytest.fixture
def repository(
    memory_store: TieredKeyValueStore, id_generator: CounterIdGenerator
) -> FlashcardRepository:
    return FlashcardRepository(memory_store, id_generator)


@pytest.fixture
def use_case(
    repository: FlashcardRepository, id_generator: CounterIdGenerator
) -> BootstrapUseCase:
    return BootstrapUseCase(repository, id_generator)


class TestBootstrapUseCase:
    async def test_seeds_empty_store(
        self, use_case: BootstrapUseCase, repository: FlashcardRepository
    ) -> None:
        assert await use_case.ensure_sample_data() is True

        flashcards = await repository.list_all()
        assert [f.id.value for f in flashcards] == [1, 2, 3]
        assert [f.set_name for f in flashcards] == ["Geografi", "Matematik", "Litteratur"]

    async def test_resets_counters_after_seeding(
        self, use_case: BootstrapUseCase, memory_store: TieredKeyValueStore
    ) -> None:
        await use_case.ensure_sample_data()

        assert await memory_store.get("counters") == {"flashcardId": 4, "setId": 1}

    async def test_next_flashcard_follows_samples(
        self, use_case: BootstrapUseCase, repository: FlashcardRepository
    ) -> None:
        await use_case.ensure_sample_data()

        created = await repository.add(Flashcard.create(front="Q", back="A"))

        assert created.id.value == 4

    async def test_is_idempotent(
        self, use_case: BootstrapUseCase, repository: FlashcardRepository
    ) -> None:
        await use_case.ensure_sample_data()

        assert await use_case.ensure_sample_data() is False
        assert len(await repository.list_all()) == 3

    async def test_leaves_existing_data(
        self, use_case: BootstrapUseCase, repository: FlashcardRepository
    ) -> None:
        await repository.add(Flashcard.create(front="Mine", back="A"))

        assert await use_case.ensure_sample_data() is False
        assert [f.front for f in await repository.list_all()] == ["Mine"]
