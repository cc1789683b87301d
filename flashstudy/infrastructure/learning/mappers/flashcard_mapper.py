"""Mapper between Flashcard entities and their stored JSON records."""

from typing import Any

from flashstudy.constants import DEFAULT_SET_NAME
from flashstudy.domain.common.value_objects import FlashcardId
from flashstudy.domain.learning.entities.flashcard import Flashcard
from flashstudy.utils import format_timestamp, parse_timestamp


class FlashcardMapper:
    """
    Maps Flashcard entities to and from stored records.

    Records use the camelCase keys of the public JSON contract:
    id, front, back, set, createdAt, updatedAt (only once updated), reviewCount.
    """

    def to_domain(self, record: dict[str, Any]) -> Flashcard:
        """Convert a stored record to a domain entity."""
        updated_at = record.get("updatedAt")
        return Flashcard(
            id=FlashcardId(int(record["id"])),
            front=record.get("front", ""),
            back=record.get("back", ""),
            set_name=record.get("set") or DEFAULT_SET_NAME,
            created_at=parse_timestamp(record["createdAt"]),
            updated_at=parse_timestamp(updated_at) if updated_at else None,
            review_count=int(record.get("reviewCount", 0)),
        )

    def to_record(self, flashcard: Flashcard) -> dict[str, Any]:
        """Convert a domain entity to a storable record."""
        record: dict[str, Any] = {
            "id": flashcard.id.value,
            "front": flashcard.front,
            "back": flashcard.back,
            "set": flashcard.set_name,
            "createdAt": format_timestamp(flashcard.created_at),
            "reviewCount": flashcard.review_count,
        }
        if flashcard.updated_at is not None:
            record["updatedAt"] = format_timestamp(flashcard.updated_at)
        return record
