"""
Identity building blocks for domain entities.

An entity keeps its identity while its attributes change, so entities
compare by id only. Ids are small typed wrappers around integers handed
out by the id generator.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed integer entity identifiers.

    The value 0 is a placeholder for entities that have not been
    assigned an identifier by the ID generator yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. Real ids are assigned when the entity is stored."""
        return cls(0)

    @property
    def is_assigned(self) -> bool:
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
