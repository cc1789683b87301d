"""Key-value store lifecycle and request access."""

from typing import Annotated

import structlog
from fastapi import Depends, Request

from flashstudy.config import Settings
from flashstudy.infrastructure.storage.key_value_store import TieredKeyValueStore

logger = structlog.get_logger(__name__)


async def open_store(settings: Settings) -> TieredKeyValueStore:
    """Create the application's store handle once at startup."""
    if not settings.external_store_enabled:
        logger.info("key_value_store_memory_only")
        return TieredKeyValueStore()

    store = TieredKeyValueStore.from_url(settings.REDIS_URL, settings.REDIS_SOCKET_TIMEOUT)
    if await store.ping():
        logger.info("key_value_store_connected", backend=store.backend)
    else:
        # Keep the client: operations retry Redis and fall back per call
        logger.warning("key_value_store_starting_degraded", backend=store.backend)

    return store


async def close_store(store: TieredKeyValueStore) -> None:
    """Close the store handle on shutdown."""
    await store.close()
    logger.info("key_value_store_closed")


def get_store(request: Request) -> TieredKeyValueStore:
    """Get the store handle opened by the application lifespan."""
    store: TieredKeyValueStore | None = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Key-value store not initialized. Is the app lifespan running?")
    return store


# Type alias for store dependency
KeyValueStore = Annotated[TieredKeyValueStore, Depends(get_store)]
