"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from typing import Any

import fakeredis
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from flashstudy.config import Settings
from flashstudy.infrastructure.storage.id_generator import CounterIdGenerator
from flashstudy.infrastructure.storage.key_value_store import (
    MemoryKeyValueStore,
    TieredKeyValueStore,
)
from flashstudy.main import create_app


class UnreachableRedis:
    """Client double whose every command fails like a dropped connection."""

    def __init__(self) -> None:
        self.calls = 0
        self.closed = False

    async def _fail(self, *args: Any, **kwargs: Any) -> Any:
        self.calls += 1
        raise RedisConnectionError("Connection refused")

    get = set = ping = transaction = _fail

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    """Settings for a memory-only app, ignoring any local .env file."""
    return Settings(_env_file=None, REDIS_URL=None, ENVIRONMENT="test")  # type: ignore[call-arg]


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, Any, None]:
    """Create a test client; entering it runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def memory_store() -> TieredKeyValueStore:
    """Store handle without an external tier."""
    return TieredKeyValueStore(memory=MemoryKeyValueStore())


@pytest.fixture
async def redis_client() -> AsyncGenerator[fakeredis.FakeAsyncRedis, None]:
    """In-process Redis double with its own server per test."""
    client = fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
def redis_store(redis_client: fakeredis.FakeAsyncRedis) -> TieredKeyValueStore:
    """Store handle with a reachable external tier."""
    return TieredKeyValueStore(client=redis_client)


@pytest.fixture
def id_generator(memory_store: TieredKeyValueStore) -> CounterIdGenerator:
    return CounterIdGenerator(memory_store)


@pytest.fixture
def unreachable_redis() -> UnreachableRedis:
    return UnreachableRedis()


@pytest.fixture
def degraded_store(unreachable_redis: UnreachableRedis) -> TieredKeyValueStore:
    """Store handle whose external tier is configured but down."""
    return TieredKeyValueStore(client=unreachable_redis)  # type: ignore[arg-type]
