"""Service Response: the uniform success/failure envelope.

Invariants:
    - Envelopes are immutable once built
    - success() carries the payload; failure() carries None by convention
    - Delete is the one success whose payload is None
    - to_dict() produces the wire shape {success, message, responseObject, statusCode}

Design Decisions:
    - Built only through success() and failure(): every envelope in the
      codebase reads as one of the two outcomes
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResponse(Generic[T]):
    """Result of one service operation, written verbatim to the client."""
    success: bool
    message: str
    response_object: T | None
    status_code: int

    def to_dict(self) -> dict:
        """Wire shape with the payload as-is (not JSON-encoded)."""
        return {
            "success": self.success,
            "message": self.message,
            "responseObject": self.response_object,
            "statusCode": self.status_code,
        }


def success(
    message: str, response_object: T | None, status_code: int = HTTPStatus.OK,
) -> ServiceResponse[T]:
    """Build a success envelope (default 200)."""
    return ServiceResponse(True, message, response_object, int(status_code))


def failure(
    message: str, response_object: T | None = None,
    status_code: int = HTTPStatus.BAD_REQUEST,
) -> ServiceResponse[T]:
    """Build a failure envelope."""
    return ServiceResponse(False, message, response_object, int(status_code))
