from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashstudy.core import container
from flashstudy.storage import KeyValueStore

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[KeyValueStore], T]:
    """
    Create a FastAPI dependency for a container provider.

    Automatically handles container.store override with the store handle of the
    running application.
    """

    def dependency(store: KeyValueStore) -> T:
        try:
            container.store.override(store)
            return provider()
        finally:
            # Reset override after the use case is built
            container.store.reset_override()

    return dependency
