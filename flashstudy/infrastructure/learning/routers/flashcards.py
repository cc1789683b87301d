"""API routes for flashcard management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashstudy.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from flashstudy.constants import DEFAULT_SET_NAME
from flashstudy.core import container
from flashstudy.dependencies import ensure_sample_data
from flashstudy.exceptions import FlashstudyError, ValidationError
from flashstudy.infrastructure.common.di import inject_use_case
from flashstudy.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardListResponse,
    FlashcardMutationResponse,
    FlashcardResponse,
    FlashcardWriteRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/flashcards",
    tags=["flashcards"],
    dependencies=[Depends(ensure_sample_data)],
)


def _parse_flashcard_id(raw_id: str) -> int:
    try:
        return int(raw_id)
    except ValueError as e:
        raise ValidationError("Invalid flashcard ID", field="id") from e


def _require_front_and_back(request: FlashcardWriteRequest) -> None:
    if not request.front or not request.back:
        raise ValidationError("Front and back are required")


@router.get(
    "",
    response_model=FlashcardListResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def list_flashcards(
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardListResponse:
    """
    Get all flashcards in insertion order.

    Raises:
        HTTPException: If retrieval fails due to server error
    """
    try:
        flashcards = [Flashcard.from_entity(f) for f in await use_case.list_flashcards()]
        return FlashcardListResponse(success=True, count=len(flashcards), data=flashcards)
    except FlashstudyError:
        raise
    except Exception as e:
        logger.error(f"Failed to retrieve flashcards: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve flashcards",
        ) from e


@router.post(
    "",
    response_model=FlashcardMutationResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_flashcard(
    request: FlashcardWriteRequest,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardMutationResponse:
    """
    Create a new flashcard.

    Args:
        request: Request containing front, back and an optional set name
        use_case: FlashcardUseCase injected via dependency container

    Returns:
        Created flashcard

    Raises:
        ValidationError: If front or back is missing or blank
        HTTPException: If creation fails due to server error
    """
    _require_front_and_back(request)
    try:
        flashcard = await use_case.create_flashcard(
            front=request.front or "",
            back=request.back or "",
            set_name=request.set_name or DEFAULT_SET_NAME,
        )
        return FlashcardMutationResponse(
            success=True,
            message="Flashcard successfully created",
            data=Flashcard.from_entity(flashcard),
        )
    except FlashstudyError:
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create flashcard",
        ) from e


@router.get(
    "/{flashcard_id}",
    response_model=FlashcardResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def get_flashcard(
    flashcard_id: str,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardResponse:
    """
    Get a flashcard by ID.

    Raises:
        ValidationError: If the ID is not numeric
        FlashcardNotFoundError: If flashcard is not found
        HTTPException: If retrieval fails due to server error
    """
    parsed_id = _parse_flashcard_id(flashcard_id)
    try:
        flashcard = await use_case.get_flashcard(parsed_id)
        return FlashcardResponse(success=True, data=Flashcard.from_entity(flashcard))
    except FlashstudyError:
        raise
    except Exception as e:
        logger.error(f"Failed to retrieve flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve flashcard",
        ) from e


@router.put(
    "/{flashcard_id}",
    response_model=FlashcardMutationResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def update_flashcard(
    flashcard_id: str,
    request: FlashcardWriteRequest,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardMutationResponse:
    """
    Update a flashcard's front, back and/or set.

    Blank front or back keeps the current value. A missing or blank set moves
    the flashcard to the General set.

    Args:
        flashcard_id: ID of the flashcard to update
        request: Request containing updated front, back and optional set
        use_case: FlashcardUseCase injected via dependency container

    Returns:
        Updated flashcard

    Raises:
        ValidationError: If the ID is not numeric or front/back is missing
        FlashcardNotFoundError: If flashcard is not found
        HTTPException: If update fails due to server error
    """
    parsed_id = _parse_flashcard_id(flashcard_id)
    _require_front_and_back(request)
    try:
        flashcard = await use_case.update_flashcard(
            flashcard_id=parsed_id,
            front=request.front,
            back=request.back,
            set_name=(request.set_name or "").strip() or DEFAULT_SET_NAME,
        )
        return FlashcardMutationResponse(
            success=True,
            message="Successfully updated flashcard",
            data=Flashcard.from_entity(flashcard),
        )
    except FlashstudyError:
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update flashcard",
        ) from e


@router.delete(
    "/{flashcard_id}",
    response_model=FlashcardMutationResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def delete_flashcard(
    flashcard_id: str,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardMutationResponse:
    """
    Delete a flashcard.

    Args:
        flashcard_id: ID of the flashcard to delete
        use_case: FlashcardUseCase injected via dependency container

    Returns:
        The deleted flashcard

    Raises:
        ValidationError: If the ID is not numeric
        FlashcardNotFoundError: If flashcard is not found
        HTTPException: If deletion fails due to server error
    """
    parsed_id = _parse_flashcard_id(flashcard_id)
    try:
        flashcard = await use_case.delete_flashcard(parsed_id)
        return FlashcardMutationResponse(
            success=True,
            message="Flashcard deleted successfully",
            data=Flashcard.from_entity(flashcard),
        )
    except FlashstudyError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete flashcard",
        ) from e
