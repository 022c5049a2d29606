"""Users API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the envelope shape
    - CORS configured from settings (not hardcoded)
    - The lifespan builds DatabaseSessionManager -> SqlUserRepository -> UserService
      and publishes them on app.state; nothing is constructed at import time
    - Startup fails if the schema cannot be created or seeded
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import get_settings
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.infrastructure.observability import log_requests, setup_logging
from users_api.infrastructure.user_repository import SqlUserRepository
from users_api.services.seed_users import seed_database
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if await db_manager.health_check():
        logger.info("Database connection established successfully")
    else:
        logger.warning("Database unreachable at startup")
    if settings.database_auto_create:
        await db_manager.create_schema()
    if settings.should_seed:
        await seed_database(db_manager)

    app.state.db_manager = db_manager
    app.state.user_service = UserService(SqlUserRepository(db_manager))
    logger.info(
        f"Users API started ({settings.environment}) on {settings.host}:{settings.port}",
    )
    yield
    logger.info("Users API shutting down")
    await db_manager.dispose()


app = FastAPI(title="Users API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)
