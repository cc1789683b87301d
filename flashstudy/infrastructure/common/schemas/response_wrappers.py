"""Common schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base schema serialized with camelCase keys; accepts field names or aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(ApiModel):
    """Error body shared by every failing API response."""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human readable error message")


class HealthResponse(ApiModel):
    """Service health with the state of the key-value store."""

    status: str
    storage: str = Field(..., description="Tier tried first: redis or memory")
    fallbacks: int = Field(..., description="Operations served by the memory fallback")
