"""Pydantic schemas for Flashcard API request/response validation."""

from pydantic import Field

from flashstudy.domain.learning.entities.flashcard import Flashcard as FlashcardEntity
from flashstudy.infrastructure.common.schemas import ApiModel
from flashstudy.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper


class Flashcard(ApiModel):
    """Schema for Flashcard response."""

    id: int
    front: str
    back: str
    set_name: str = Field(..., alias="set", description="Name of the set the card belongs to")
    created_at: str = Field(..., description="ISO 8601 UTC timestamp")
    updated_at: str | None = Field(None, description="ISO 8601 UTC timestamp of the last update")
    review_count: int = 0

    @classmethod
    def from_entity(cls, flashcard: FlashcardEntity) -> "Flashcard":
        """Build the response schema from the stored record of a domain entity."""
        return cls.model_validate(FlashcardMapper().to_record(flashcard))


class FlashcardWriteRequest(ApiModel):
    """
    Schema for creating or updating a flashcard.

    Fields are optional here so that a missing front or back is reported
    with the API's own 400 error instead of a schema error.
    """

    front: str | None = Field(None, description="Front (question) text")
    back: str | None = Field(None, description="Back (answer) text")
    set_name: str | None = Field(None, alias="set", description="Set name, defaults to General")


class FlashcardListResponse(ApiModel):
    """Schema for list of flashcards response."""

    success: bool
    count: int
    data: list[Flashcard]


class FlashcardResponse(ApiModel):
    """Schema for a single flashcard response."""

    success: bool
    data: Flashcard


class FlashcardMutationResponse(ApiModel):
    """Schema for flashcard create, update and delete responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    data: Flashcard = Field(..., description="Created, updated or deleted flashcard")
