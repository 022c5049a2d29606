"""HTTP Handlers: write a ServiceResponse as the transport response.

Invariants:
    - Status code of the HTTP response == envelope.status_code
    - Body is the full envelope; payloads are dumped through their response schema
    - A missing envelope becomes a 500 "unexpected error" envelope
    - 204 responses carry no body (HTTP forbids one)
"""

from functools import lru_cache
from http import HTTPStatus
from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse
from pydantic import TypeAdapter

from users_api.core.service_response import ServiceResponse, failure

UNDEFINED_RESPONSE_MESSAGE = "An unexpected error occurred: Service response is undefined"


@lru_cache(maxsize=None)
def _adapter(payload_type: Any) -> TypeAdapter:
    return TypeAdapter(payload_type)


def serialize_payload(payload: Any, payload_type: Any = None) -> Any:
    """JSON-ready payload, validated from attributes when a schema is given."""
    if payload is None or payload_type is None:
        return payload
    adapter = _adapter(payload_type)
    model = adapter.validate_python(payload, from_attributes=True)
    return adapter.dump_python(model, mode="json", by_alias=True)


def handle_service_response(
    service_response: ServiceResponse | None, payload_type: Any = None,
) -> Response:
    """Write the envelope with its own status code."""
    if service_response is None:
        service_response = failure(
            UNDEFINED_RESPONSE_MESSAGE, None, HTTPStatus.INTERNAL_SERVER_ERROR,
        )
    if service_response.status_code == HTTPStatus.NO_CONTENT:
        return Response(status_code=HTTPStatus.NO_CONTENT)

    content = service_response.to_dict()
    content["responseObject"] = serialize_payload(
        service_response.response_object, payload_type,
    )
    return JSONResponse(status_code=service_response.status_code, content=content)
