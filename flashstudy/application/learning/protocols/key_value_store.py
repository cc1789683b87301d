"""Protocol for the key-value store backing the learning context."""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class KeyValueStoreProtocol(Protocol):
    """Protocol for a JSON key-value store."""

    async def get(self, key: str) -> Any:  # noqa: ANN401
        """
        Read a JSON value.

        Args:
            key: The storage key

        Returns:
            The stored value, or the default for the key when absent
        """
        ...

    async def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        """
        Write a JSON-serializable value.

        Args:
            key: The storage key
            value: The value to store
        """
        ...

    async def update(self, key: str, mutate: Callable[[Any], T]) -> T:
        """
        Atomically read, change and write back one key.

        Args:
            key: The storage key
            mutate: Called with the current value, changes it in place and
                returns a result. If it raises, nothing is written.

        Returns:
            Whatever mutate returned
        """
        ...
