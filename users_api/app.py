from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.core.config import get_settings
from users_api.core.errors import register_exception_handlers
from users_api.core.logging import configure_logging
from users_api.db.create_tables import create_all
from users_api.routers import users as users_router
from users_api.services.provider import build_user_service
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(user_service: UserService | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn; tests pass their own service."""
    settings = get_settings()
    configure_logging(settings.log_level)
    owns_storage = user_service is None

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if owns_storage:
            create_all()
            logger.info("Database schema ready (%s)", settings.app_env)
        yield

    app = FastAPI(title="Users API", lifespan=lifespan)
    app.state.user_service = user_service or build_user_service()

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update({"http://localhost:8000", "http://127.0.0.1:8000"})
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(users_router.router)
    return app


app = create_app()
