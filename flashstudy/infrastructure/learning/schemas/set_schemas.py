"""Pydantic schemas for flashcard set API request/response validation."""

from pydantic import Field

from flashstudy.domain.learning.entities.flashcard_set import FlashcardSet as FlashcardSetEntity
from flashstudy.infrastructure.common.schemas import ApiModel
from flashstudy.infrastructure.learning.schemas.flashcard_schemas import Flashcard
from flashstudy.utils import format_timestamp


class FlashcardSet(ApiModel):
    """Schema for a derived set. The id is recomputed on every read."""

    id: int
    name: str
    description: str = ""
    created_at: str = Field(..., description="Earliest created_at among member flashcards")
    card_count: int

    @classmethod
    def from_entity(cls, flashcard_set: FlashcardSetEntity) -> "FlashcardSet":
        return cls(
            id=flashcard_set.id,
            name=flashcard_set.name,
            description=flashcard_set.description,
            created_at=format_timestamp(flashcard_set.created_at),
            card_count=flashcard_set.card_count,
        )


class SetCreateRequest(ApiModel):
    """Schema for creating a set."""

    name: str | None = Field(None, description="Set name, unique ignoring case")
    description: str | None = Field(None, description="Optional description")


class SetListResponse(ApiModel):
    """Schema for list of sets response."""

    success: bool
    count: int
    data: list[FlashcardSet]


class SetCreateResponse(ApiModel):
    """Schema for set creation response."""

    success: bool
    message: str
    data: FlashcardSet


class SetFlashcardsResponse(ApiModel):
    """Schema for the flashcards of one set."""

    success: bool
    set_name: str = Field(..., alias="set", description="Set name as requested")
    count: int
    data: list[Flashcard]
