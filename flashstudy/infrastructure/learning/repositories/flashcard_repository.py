"""Repository for Flashcard domain entities."""

import dataclasses
from collections.abc import Sequence
from typing import Any

from flashstudy.application.learning.protocols.id_generator import IdGeneratorProtocol
from flashstudy.application.learning.protocols.key_value_store import KeyValueStoreProtocol
from flashstudy.constants import FLASHCARDS_KEY
from flashstudy.domain.common.value_objects import FlashcardId
from flashstudy.domain.learning.entities.flashcard import Flashcard
from flashstudy.exceptions import FlashcardNotFoundError, SetAlreadyExistsError
from flashstudy.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper

Records = list[dict[str, Any]]


class FlashcardRepository:
    """
    Repository for Flashcard domain entities.

    The whole collection is one list value under the "flashcards" key.
    Every mutation reads the list, changes it and writes it back inside a
    single atomic store update.
    """

    def __init__(self, store: KeyValueStoreProtocol, id_generator: IdGeneratorProtocol) -> None:
        self.store = store
        self.id_generator = id_generator
        self.mapper = FlashcardMapper()

    async def list_all(self) -> list[Flashcard]:
        """
        Get all flashcards.

        Returns:
            List of flashcard entities in insertion order
        """
        records: Records = await self.store.get(FLASHCARDS_KEY)
        return [self.mapper.to_domain(record) for record in records]

    async def find_by_id(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """
        Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard ID

        Returns:
            Flashcard entity if found, None otherwise
        """
        for flashcard in await self.list_all():
            if flashcard.id == flashcard_id:
                return flashcard
        return None

    async def find_by_set(self, set_name: str) -> list[Flashcard]:
        """
        Get all flashcards of a set.

        Args:
            set_name: Set name, matched case-insensitively

        Returns:
            List of flashcard entities in insertion order
        """
        return [f for f in await self.list_all() if f.belongs_to(set_name)]

    async def add(self, flashcard: Flashcard) -> Flashcard:
        """
        Assign an ID to a new flashcard and append it.

        Args:
            flashcard: The unsaved flashcard entity

        Returns:
            Stored flashcard entity with its assigned ID
        """
        stored = await self._with_new_id(flashcard)

        def append(records: Records) -> None:
            records.append(self.mapper.to_record(stored))

        await self.store.update(FLASHCARDS_KEY, append)
        return stored

    async def add_to_new_set(self, flashcard: Flashcard) -> Flashcard:
        """
        Append a flashcard only if no stored flashcard shares its set name.

        The set is checked before an ID is drawn and again inside the store
        update, so only a concurrent creation of the same set consumes an ID.

        Args:
            flashcard: The unsaved flashcard entity

        Returns:
            Stored flashcard entity with its assigned ID

        Raises:
            SetAlreadyExistsError: If the set is already derivable
        """
        if any(f.set_key == flashcard.set_key for f in await self.list_all()):
            raise SetAlreadyExistsError(flashcard.set_name)

        stored = await self._with_new_id(flashcard)

        def append_if_set_absent(records: Records) -> None:
            if any(self.mapper.to_domain(r).set_key == stored.set_key for r in records):
                raise SetAlreadyExistsError(stored.set_name)
            records.append(self.mapper.to_record(stored))

        await self.store.update(FLASHCARDS_KEY, append_if_set_absent)
        return stored

    async def update(
        self,
        flashcard_id: FlashcardId,
        front: str | None = None,
        back: str | None = None,
        set_name: str | None = None,
    ) -> Flashcard:
        """
        Merge non-empty values over a stored flashcard.

        Args:
            flashcard_id: ID of the flashcard to update
            front: New front text (optional, empty keeps the current value)
            back: New back text (optional, empty keeps the current value)
            set_name: New set name (optional, empty keeps the current value)

        Returns:
            Updated flashcard entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """

        def revise(records: Records) -> Flashcard:
            index = self._index_of(records, flashcard_id)
            flashcard = self.mapper.to_domain(records[index])
            flashcard.revise(front=front, back=back, set_name=set_name)
            records[index] = self.mapper.to_record(flashcard)
            return flashcard

        return await self.store.update(FLASHCARDS_KEY, revise)

    async def delete(self, flashcard_id: FlashcardId) -> Flashcard:
        """
        Remove a flashcard.

        Args:
            flashcard_id: ID of the flashcard to delete

        Returns:
            The removed flashcard entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """

        def remove(records: Records) -> Flashcard:
            index = self._index_of(records, flashcard_id)
            return self.mapper.to_domain(records.pop(index))

        return await self.store.update(FLASHCARDS_KEY, remove)

    async def seed_if_empty(self, flashcards: Sequence[Flashcard]) -> bool:
        """
        Store flashcards only when the collection is empty.

        Args:
            flashcards: Flashcards with IDs already assigned

        Returns:
            True if the flashcards were stored
        """

        def fill(records: Records) -> bool:
            if records:
                return False
            records.extend(self.mapper.to_record(f) for f in flashcards)
            return True

        return await self.store.update(FLASHCARDS_KEY, fill)

    async def _with_new_id(self, flashcard: Flashcard) -> Flashcard:
        new_id = await self.id_generator.generate_id("flashcard")
        return dataclasses.replace(flashcard, id=FlashcardId(new_id))

    @staticmethod
    def _index_of(records: Records, flashcard_id: FlashcardId) -> int:
        for index, record in enumerate(records):
            if int(record.get("id", 0)) == flashcard_id.value:
                return index
        raise FlashcardNotFoundError(flashcard_id.value)
