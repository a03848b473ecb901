"""
Shared test fixtures.

Every test gets its own SQLite file under tmp_path and a cheap bcrypt cost.
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from helpdesk.application.services.auth_service import IdentityService
from helpdesk.application.services.ticket_service import TicketService
from helpdesk.config import Settings
from helpdesk.core.context import ServiceContext
from helpdesk.domain.models.ticket import Ticket
from helpdesk.domain.models.user import User
from helpdesk.infrastructure.repositories.ticket_repository import SQLAlchemyTicketRepository
from helpdesk.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from helpdesk.main import create_app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"


# =============================================================================
# CONFIGURATION
# =============================================================================

@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'helpdesk-test.db'}",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


class StepClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self, start=datetime(2026, 1, 1, 9, 0, 0)):
        self.current = start

    def __call__(self):
        value = self.current
        self.current += timedelta(seconds=1)
        return value


# =============================================================================
# SERVICE LAYER
# =============================================================================

@pytest.fixture
def context(settings):
    ctx = ServiceContext.from_settings(settings)
    ctx.clock = StepClock()
    ctx.database.create_tables()
    yield ctx
    ctx.database.dispose()


@pytest.fixture
def db(context):
    with context.database.session() as session:
        yield session


@pytest.fixture
def identity(context, db):
    return IdentityService(SQLAlchemyUserRepository(db, User), context.hasher, context.signer, context.clock)


@pytest.fixture
def tickets(context, db):
    return TicketService(
        SQLAlchemyTicketRepository(db, Ticket),
        SQLAlchemyUserRepository(db, User),
        context.clock,
    )


# =============================================================================
# HTTP LAYER
# =============================================================================

@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, email, password="secret-pass", full_name=None):
    body = {"email": email, "password": password}
    if full_name is not None:
        body["fullName"] = full_name
    response = client.post("/api/auth/register", json=body)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def admin_token(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def alice(client):
    return register(client, "alice@example.com", full_name="Alice Doe")


@pytest.fixture
def bob(client):
    return register(client, "bob@example.com", full_name="Bob Roe")
