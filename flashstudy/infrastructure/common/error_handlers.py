"""Exception handlers rendering every failure as `{success: false, error}`."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashstudy.exceptions import FlashstudyError
from flashstudy.infrastructure.common.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(by_alias=True),
    )


async def handle_flashstudy_error(request: Request, exc: FlashstudyError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    logger.debug(f"Rejected request to {request.url.path}: {exc!s}")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc!s}", exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application."""
    app.add_exception_handler(FlashstudyError, handle_flashstudy_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        StarletteHTTPException,
        handle_http_exception,  # type: ignore[arg-type]
    )
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
