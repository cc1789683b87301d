"""Learning context schemas."""

from flashstudy.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardListResponse,
    FlashcardMutationResponse,
    FlashcardResponse,
    FlashcardWriteRequest,
)
from flashstudy.infrastructure.learning.schemas.set_schemas import (
    FlashcardSet,
    SetCreateRequest,
    SetCreateResponse,
    SetFlashcardsResponse,
    SetListResponse,
)

__all__ = [
    "Flashcard",
    "FlashcardListResponse",
    "FlashcardMutationResponse",
    "FlashcardResponse",
    "FlashcardSet",
    "FlashcardWriteRequest",
    "SetCreateRequest",
    "SetCreateResponse",
    "SetFlashcardsResponse",
    "SetListResponse",
]
