"""Request Dependencies: hand routes the objects built in the lifespan.

Invariants:
    - Nothing here constructs services or pools; they live on app.state
    - Tests replace get_user_service / get_db_manager via app.dependency_overrides
"""

from fastapi import Request

from users_api.infrastructure.database import DatabaseSessionManager
from users_api.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    service = getattr(request.app.state, "user_service", None)
    if service is None:
        raise RuntimeError("User service not initialized")
    return service


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)
