"""User Routes: bind /users verbs to validation schemas and the user service.

Invariants:
    - Validation (path id, body) completes before the route body runs; FastAPI
      collects path and body violations into one RequestValidationError
    - Route bodies only extract primitives, call the service, and write the envelope
    - Each route declares its envelope schemas so /openapi.json documents every outcome
"""

from fastapi import APIRouter, Depends, status

from users_api.api.dependencies import get_user_service
from users_api.api.http_handlers import handle_service_response
from users_api.api.validation import UserIdPath
from users_api.core.domain_types import UserId
from users_api.schemas.envelope import ServiceResponseSchema, failure_response
from users_api.schemas.user import CreateUserBody, UpdateUserBody, UserResponse
from users_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["User"])

_INVALID_INPUT = failure_response("Invalid input")
_NOT_FOUND = failure_response("User not found")
_CONFLICT = failure_response("Email already in use")


@router.get(
    "",
    response_model=ServiceResponseSchema[list[UserResponse]],
    responses={status.HTTP_404_NOT_FOUND: failure_response("No Users found")},
)
async def get_users(service: UserService = Depends(get_user_service)):
    """List all users."""
    service_response = await service.find_all()
    return handle_service_response(service_response, list[UserResponse])


@router.get(
    "/{id}",
    response_model=ServiceResponseSchema[UserResponse],
    responses={
        status.HTTP_400_BAD_REQUEST: _INVALID_INPUT,
        status.HTTP_404_NOT_FOUND: _NOT_FOUND,
    },
)
async def get_user(
    id: UserIdPath,  # noqa: A002
    service: UserService = Depends(get_user_service),
):
    """Get one user by id."""
    service_response = await service.find_by_id(UserId(id))
    return handle_service_response(service_response, UserResponse)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ServiceResponseSchema[UserResponse],
    responses={
        status.HTTP_400_BAD_REQUEST: _INVALID_INPUT,
        status.HTTP_409_CONFLICT: _CONFLICT,
    },
)
async def create_user(
    body: CreateUserBody, service: UserService = Depends(get_user_service),
):
    """Create a user; the email must not be in use."""
    service_response = await service.create(body.to_new_user())
    return handle_service_response(service_response, UserResponse)


@router.put(
    "/{id}",
    response_model=ServiceResponseSchema[UserResponse],
    responses={
        status.HTTP_400_BAD_REQUEST: _INVALID_INPUT,
        status.HTTP_404_NOT_FOUND: _NOT_FOUND,
        status.HTTP_409_CONFLICT: _CONFLICT,
    },
)
async def update_user(
    id: UserIdPath,  # noqa: A002
    body: UpdateUserBody,
    service: UserService = Depends(get_user_service),
):
    """Update any subset of name, email, age."""
    service_response = await service.update(UserId(id), body.to_patch())
    return handle_service_response(service_response, UserResponse)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        status.HTTP_400_BAD_REQUEST: _INVALID_INPUT,
        status.HTTP_404_NOT_FOUND: _NOT_FOUND,
    },
)
async def delete_user(
    id: UserIdPath,  # noqa: A002
    service: UserService = Depends(get_user_service),
):
    """Hard-delete a user."""
    service_response = await service.delete(UserId(id))
    return handle_service_response(service_response)
