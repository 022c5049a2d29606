"""User Schemas: per-endpoint input validation and the public user shape.

Invariants:
    - UserIdParams.id: numeric and > 0 ("ID must be a numeric value" / "ID must be a positive number")
    - name: text, >= 2 chars; email: valid syntax; age: integer >= 0 (a JSON number; integral floats accepted, strings rejected)
    - CreateUserBody requires name and email; age optional
    - UpdateUserBody: every field optional, at least one supplied, explicit null rejected
    - Validation never rewrites values, except that an integral float age (40.0) becomes int

Design Decisions:
    - PydanticCustomError carries the exact client-facing message, so the
      validation handler only has to join msg fields
"""

from datetime import datetime
from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field,
    model_validator,
)
from pydantic_core import PydanticCustomError

from users_api.core.domain_types import NewUser, UserPatch


# --- Field rules --------------------------------------------------------------

def _check_name(value: str) -> str:
    if len(value) < 2:
        raise PydanticCustomError(
            "name_too_short", "Name must be at least 2 characters",
        )
    return value


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("invalid_email", "Invalid email format") from None
    return value


def _require_number(value: Any) -> Any:
    # JSON numbers only; integral floats such as 40.0 are narrowed to int afterwards
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


def _check_age(value: int) -> int:
    if value < 0:
        raise PydanticCustomError(
            "age_negative", "Age must be a positive number",
        )
    return value


UserName = Annotated[str, AfterValidator(_check_name)]
UserEmail = Annotated[str, AfterValidator(_check_email)]
UserAge = Annotated[
    int, BeforeValidator(_require_number), AfterValidator(_check_age),
]


def _reject_explicit_nulls(data: Any) -> Any:
    if isinstance(data, dict):
        for key in ("name", "email", "age"):
            if key in data and data[key] is None:
                raise PydanticCustomError(
                    "null_field", "{field} cannot be null", {"field": key},
                )
    return data


# --- Path parameters ----------------------------------------------------------

def _parse_user_id(v: Any) -> int:
    if isinstance(v, bool):
        raise PydanticCustomError("id_not_numeric", "ID must be a numeric value")
    if isinstance(v, int):
        number = v
    else:
        try:
            number = int(str(v).strip())
        except ValueError:
            raise PydanticCustomError(
                "id_not_numeric", "ID must be a numeric value",
            ) from None
    if number <= 0:
        raise PydanticCustomError(
            "id_not_positive", "ID must be a positive number",
        )
    return number


UserIdValue = Annotated[int, BeforeValidator(_parse_user_id)]


class UserIdParams(BaseModel):
    """Path parameters shared by GET/PUT/DELETE /users/{id}."""
    id: UserIdValue


# --- Bodies -------------------------------------------------------------------

class CreateUserBody(BaseModel):
    """Body for POST /users."""
    name: UserName
    email: UserEmail
    age: UserAge | None = None

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        return _reject_explicit_nulls(data)

    def to_new_user(self) -> NewUser:
        return NewUser(name=self.name, email=self.email, age=self.age)


class UpdateUserBody(BaseModel):
    """Body for PUT /users/{id}: any subset of the create fields, but not none."""
    name: UserName | None = None
    email: UserEmail | None = None
    age: UserAge | None = None

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        return _reject_explicit_nulls(data)

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set:
            raise PydanticCustomError(
                "empty_update", "At least one field must be provided for update",
            )
        return self

    def to_patch(self) -> UserPatch:
        return UserPatch(name=self.name, email=self.email, age=self.age)


# --- Responses ----------------------------------------------------------------

class UserResponse(BaseModel):
    """Public user shape (timestamps serialized as createdAt / updatedAt)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int | None = None
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
