"""Common infrastructure schemas."""

from flashstudy.infrastructure.common.schemas.response_wrappers import (
    ApiModel,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ApiModel",
    "ErrorResponse",
    "HealthResponse",
]
