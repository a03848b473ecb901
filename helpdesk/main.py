"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from helpdesk.application.services.auth_service import IdentityService
from helpdesk.config import Settings, get_settings
from helpdesk.core.context import ServiceContext
from helpdesk.core.exceptions import register_exception_handlers
from helpdesk.core.logging import configure_logging
from helpdesk.core.middleware import setup_middleware
from helpdesk.domain.models.user import User
from helpdesk.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from helpdesk.interfaces.api.admin import router as admin_router
from helpdesk.interfaces.api.auth import router as auth_router
from helpdesk.interfaces.api.tickets import router as tickets_router

logger = structlog.get_logger(__name__)


def bootstrap(context: ServiceContext) -> None:
    """Create tables and the default admin account if missing."""
    context.database.create_tables()
    logger.info("Database tables created/verified")

    settings = context.settings
    with context.database.session() as db:
        identity = IdentityService(
            SQLAlchemyUserRepository(db, User),
            context.hasher,
            context.signer,
            context.clock,
        )
        identity.bootstrap_admin(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, settings.ADMIN_FULL_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    context: ServiceContext = app.state.context
    logger.info("Starting Helpdesk API", env=context.settings.ENVIRONMENT)
    bootstrap(context)

    yield

    context.database.dispose()
    logger.info("Helpdesk API stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Helpdesk",
        description="Support ticketing API — users open tickets, admins triage, assign and resolve them",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.context = ServiceContext.from_settings(settings)

    setup_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(tickets_router)
    app.include_router(admin_router)

    @app.get("/")
    def root():
        return {
            "name": "Helpdesk",
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
