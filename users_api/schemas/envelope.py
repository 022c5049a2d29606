"""Envelope Schema: OpenAPI description of the ServiceResponse wire shape."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ServiceResponseSchema(BaseModel, Generic[T]):
    """{success, message, responseObject, statusCode}"""
    success: bool
    message: str
    response_object: T | None = Field(
        default=None, serialization_alias="responseObject",
    )
    status_code: int = Field(serialization_alias="statusCode")


def failure_response(description: str) -> dict:
    """`responses=` entry for a failure status (payload always null)."""
    return {"model": ServiceResponseSchema[None], "description": description}
