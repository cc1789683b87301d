"""API routes for flashcard sets."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashstudy.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from flashstudy.application.learning.use_cases.set_use_case import SetUseCase
from flashstudy.core import container
from flashstudy.dependencies import ensure_sample_data
from flashstudy.exceptions import FlashstudyError, ValidationError
from flashstudy.infrastructure.common.di import inject_use_case
from flashstudy.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardSet,
    SetCreateRequest,
    SetCreateResponse,
    SetFlashcardsResponse,
    SetListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sets",
    tags=["sets"],
    dependencies=[Depends(ensure_sample_data)],
)


@router.get("", response_model=SetListResponse, status_code=status.HTTP_200_OK)
async def list_sets(
    use_case: SetUseCase = Depends(inject_use_case(container.set_use_case)),
) -> SetListResponse:
    """
    Get all sets derived from the stored flashcards.

    Set ids are positions in the derivation and can change between calls.
    """
    try:
        sets = [FlashcardSet.from_entity(s) for s in await use_case.list_sets()]
        return SetListResponse(success=True, count=len(sets), data=sets)
    except FlashstudyError:
        raise
    except Exception as e:
        logger.error(f"Failed to retrieve sets: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve sets",
        ) from e


@router.post("", response_model=SetCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_set(
    request: SetCreateRequest,
    use_case: SetUseCase = Depends(inject_use_case(container.set_use_case)),
) -> SetCreateResponse:
    """
    Create a set by adding a placeholder flashcard to it.

    Args:
        request: Request containing the set name and optional description
        use_case: SetUseCase injected via dependency container

    Returns:
        The created set

    Raises:
        ValidationError: If the name is missing
        SetAlreadyExistsError: If a set with that name already exists
        HTTPException: If creation fails due to server error
    """
    if not request.name:
        raise ValidationError("Set name is required", field="name")
    try:
        flashcard_set = await use_case.create_set(
            name=request.name,
            description=request.description,
        )
        return SetCreateResponse(
            success=True,
            message="Set created successfully",
            data=FlashcardSet.from_entity(flashcard_set),
        )
    except FlashstudyError:
        raise
    except Exception as e:
        logger.error(f"Failed to create set: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create set",
        ) from e


@router.get(
    "/{set_name:path}/flashcards",
    response_model=SetFlashcardsResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def get_set_flashcards(
    set_name: str,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> SetFlashcardsResponse:
    """
    Get the flashcards of a set.

    The name arrives URL-decoded and is matched ignoring case. An unknown set
    is not an error, it simply has no flashcards.
    """
    try:
        flashcards = [
            Flashcard.from_entity(f) for f in await use_case.list_flashcards_by_set(set_name)
        ]
        return SetFlashcardsResponse(
            success=True,
            set_name=set_name,
            count=len(flashcards),
            data=flashcards,
        )
    except FlashstudyError:
        raise
    except Exception as e:
        logger.error(f"Failed to retrieve flashcards of set {set_name!r}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve set flashcards",
        ) from e
