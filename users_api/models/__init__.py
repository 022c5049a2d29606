"""ORM models. Import every model here so Base.metadata is complete."""

from users_api.models.user import User  # noqa: F401
