"""JSON key-value store backed by Redis with an in-process fallback tier."""

import asyncio
import json
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from redis.asyncio import Redis
from redis.asyncio.client import Pipeline
from redis.exceptions import RedisError

from flashstudy.constants import COUNTERS_KEY, DEFAULT_COUNTERS, FLASHCARDS_KEY
from flashstudy.exceptions import StorageError

logger = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_VALUES: dict[str, Any] = {
    FLASHCARDS_KEY: [],
    COUNTERS_KEY: DEFAULT_COUNTERS,
}

# Failures of the external tier that trigger the memory fallback
EXTERNAL_STORE_ERRORS = (RedisError, OSError, StorageError)


def _encode(value: Any) -> str:  # noqa: ANN401
    return json.dumps(value, ensure_ascii=False)


def _decode(key: str, raw: str) -> Any:  # noqa: ANN401
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageError(f"Malformed JSON stored under key {key!r}") from e


def _copy(value: Any) -> Any:  # noqa: ANN401
    """Detach a value from stored state, with the same JSON semantics as Redis."""
    return json.loads(_encode(value))


def default_value(key: str) -> Any:  # noqa: ANN401
    """Type-appropriate default for a key: [] for collections, default counters, else None."""
    return _copy(DEFAULT_VALUES.get(key))


class MemoryKeyValueStore:
    """Process-local tier, pre-seeded with empty collections and default counters."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = _copy(DEFAULT_VALUES)
        if initial:
            self._data.update(_copy(initial))
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any:  # noqa: ANN401
        if key in self._data:
            return _copy(self._data[key])
        return default_value(key)

    async def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        self._data[key] = _copy(value)

    async def update(self, key: str, mutate: Callable[[Any], T]) -> T:
        async with self._lock:
            value = await self.get(key)
            result = mutate(value)
            self._data[key] = _copy(value)
            return result


class TieredKeyValueStore:
    """
    Key-value store handle with an external Redis tier and a memory tier.

    Every operation goes to Redis when a client is configured. Any failure
    there (connection, timeout, malformed payload) is logged, counted and the
    operation is served by the memory tier for the same key instead. A key
    absent from Redis reads through to the memory tier. The tiers are not
    reconciled beyond that: Redis is authoritative whenever it answers.

    The handle is created at startup and closed at shutdown, see
    flashstudy.storage.
    """

    def __init__(
        self,
        client: Redis | None = None,
        memory: MemoryKeyValueStore | None = None,
    ) -> None:
        self._client = client
        self._memory = memory or MemoryKeyValueStore()
        self.fallback_count = 0

    @classmethod
    def from_url(cls, url: str | None, socket_timeout: float = 5.0) -> "TieredKeyValueStore":
        """
        Build a store for an optional Redis URL.

        Args:
            url: Redis connection URL, None for a memory-only store
            socket_timeout: Connect and read timeout in seconds

        Returns:
            TieredKeyValueStore, not yet connected (Redis connects lazily)
        """
        if not url:
            return cls()
        client = Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        return cls(client=client)

    @property
    def backend(self) -> str:
        """Name of the tier that is tried first."""
        return "redis" if self._client is not None else "memory"

    async def ping(self) -> bool:
        """Check whether the external tier answers."""
        if self._client is None:
            return False
        try:
            return bool(await self._client.ping())
        except EXTERNAL_STORE_ERRORS as e:
            logger.warning("key_value_store_unreachable", error=str(e))
            return False

    async def close(self) -> None:
        """Close the external connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, key: str) -> Any:  # noqa: ANN401
        if self._client is not None:
            try:
                raw = await self._client.get(key)
                if raw is not None:
                    return _decode(key, raw)
            except EXTERNAL_STORE_ERRORS as e:
                self._record_fallback(key, "get", e)
        return await self._memory.get(key)

    async def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        if self._client is not None:
            try:
                await self._client.set(key, _encode(value))
                return
            except EXTERNAL_STORE_ERRORS as e:
                self._record_fallback(key, "set", e)
        await self._memory.set(key, value)

    async def update(self, key: str, mutate: Callable[[Any], T]) -> T:
        if self._client is not None:
            try:
                return await self._update_external(self._client, key, mutate)
            except EXTERNAL_STORE_ERRORS as e:
                self._record_fallback(key, "update", e)
        return await self._memory.update(key, mutate)

    async def _update_external(self, client: Redis, key: str, mutate: Callable[[Any], T]) -> T:
        """Run mutate inside WATCH/MULTI/EXEC, retried by redis-py on conflict."""

        async def read_modify_write(pipe: Pipeline) -> T:
            raw = await pipe.get(key)  # type: ignore[misc]
            value = _decode(key, raw) if raw is not None else await self._memory.get(key)
            result = mutate(value)
            pipe.multi()
            pipe.set(key, _encode(value))
            return result

        return await client.transaction(read_modify_write, key, value_from_callable=True)

    def _record_fallback(self, key: str, operation: str, error: Exception) -> None:
        self.fallback_count += 1
        logger.warning(
            "key_value_store_fallback",
            key=key,
            operation=operation,
            error=str(error),
            fallback_count=self.fallback_count,
        )
