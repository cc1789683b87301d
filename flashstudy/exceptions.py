"""Custom exception hierarchy for Flashstudy application."""

from starlette import status


class FlashstudyError(Exception):
    """Base exception for all Flashstudy errors."""

    def __init__(
        self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    ) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(FlashstudyError):
    """Missing or empty required field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message, the offending field and 400 status code."""
        self.field = field
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class NotFoundError(FlashstudyError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int) -> None:
        """Initialize with flashcard ID."""
        self.flashcard_id = flashcard_id
        super().__init__("Flashcard not found")


class AlreadyExistsError(FlashstudyError):
    """Resource already exists error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=status.HTTP_409_CONFLICT)


class SetAlreadyExistsError(AlreadyExistsError):
    """A set with the same case-insensitive name is already derivable."""

    def __init__(self, name: str) -> None:
        """Initialize with the conflicting set name."""
        self.name = name
        super().__init__("Set already exists")


class StorageError(FlashstudyError):
    """External store unreachable or returned a malformed payload."""
