"""
Flashcard entity for study sets.
"""

from dataclasses import dataclass
from datetime import datetime

from flashstudy.constants import DEFAULT_SET_NAME
from flashstudy.domain.common.entity import Entity
from flashstudy.domain.common.value_objects import FlashcardId
from flashstudy.exceptions import ValidationError
from flashstudy.utils import utc_now


def _clean(value: str | None) -> str:
    return value.strip() if value else ""


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard with a front (prompt) and back (answer), tagged with a set name.

    Business Rules:
    - Front and back cannot be empty after trimming
    - Set name defaults to "General"
    - Set membership is case-insensitive (see set_key)
    """

    id: FlashcardId
    front: str
    back: str
    set_name: str
    created_at: datetime
    updated_at: datetime | None = None
    review_count: int = 0

    def __post_init__(self) -> None:
        if not _clean(self.set_name):
            self.set_name = DEFAULT_SET_NAME

    @property
    def set_key(self) -> str:
        """Case-insensitive key of the set this flashcard belongs to."""
        return self.set_name.lower()

    def belongs_to(self, set_name: str) -> bool:
        return self.set_key == set_name.lower()

    def revise(
        self,
        front: str | None = None,
        back: str | None = None,
        set_name: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """
        Merge supplied values over the current ones.

        Values are trimmed first. Empty or omitted values keep the current
        value, so passing an empty string never clears a field.

        Args:
            front: New front text (optional)
            back: New back text (optional)
            set_name: New set name (optional)
            now: Update timestamp, defaults to the current time
        """
        self.front = _clean(front) or self.front
        self.back = _clean(back) or self.back
        self.set_name = _clean(set_name) or self.set_name
        self.updated_at = now or utc_now()

    @classmethod
    def create(
        cls,
        front: str,
        back: str,
        set_name: str | None = None,
        now: datetime | None = None,
    ) -> "Flashcard":
        """
        Create a new flashcard (ID will be 0 until stored).

        Raises:
            ValidationError: If front or back is empty after trimming
        """
        if not _clean(front):
            raise ValidationError("Front cannot be empty", field="front")
        if not _clean(back):
            raise ValidationError("Back cannot be empty", field="back")

        return cls(
            id=FlashcardId.generate(),
            front=_clean(front),
            back=_clean(back),
            set_name=_clean(set_name) or DEFAULT_SET_NAME,
            created_at=now or utc_now(),
        )
