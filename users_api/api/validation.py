"""Request Validation: path-parameter parsing and the 400 envelope for schema violations.

Invariants:
    - Any schema violation short-circuits before the route body runs
    - Path and body violations of one request are reported together, path first
    - The 400 message is "Invalid input: " + every violation message joined by ", "
    - Valid input reaches the route unchanged
"""

from http import HTTPStatus
from typing import Annotated, Sequence

from fastapi import Path

from users_api.core.service_response import ServiceResponse, failure
from users_api.schemas.user import UserIdValue

INVALID_INPUT_PREFIX = "Invalid input: "

UserIdPath = Annotated[
    UserIdValue, Path(description="User identifier (positive integer)"),
]


def invalid_input_response(errors: Sequence[dict]) -> ServiceResponse[None]:
    """Failure envelope for a list of pydantic error dicts."""
    messages = ", ".join(str(error.get("msg", "")) for error in errors)
    return failure(f"{INVALID_INPUT_PREFIX}{messages}", None, HTTPStatus.BAD_REQUEST)
