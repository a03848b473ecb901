"""
API Dependencies — service context, session, repositories and services.
"""

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from helpdesk.application.services.admin_service import AdminService
from helpdesk.application.services.auth_service import IdentityService
from helpdesk.application.services.ticket_service import TicketService
from helpdesk.core.context import ServiceContext
from helpdesk.domain.models.ticket import Ticket
from helpdesk.domain.models.user import User
from helpdesk.domain.repositories.ticket_repository import TicketRepository
from helpdesk.domain.repositories.user_repository import UserRepository
from helpdesk.infrastructure.repositories.ticket_repository import SQLAlchemyTicketRepository
from helpdesk.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_context(request: Request) -> ServiceContext:
    return request.app.state.context


def get_db(context: ServiceContext = Depends(get_context)) -> Generator[Session, None, None]:
    """One transactional session per request.

    Mutating routes commit before the response is built, so a failed commit
    surfaces as an error instead of a lost write.
    """
    with context.database.session() as db:
        yield db


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_ticket_repository(db: Session = Depends(get_db)) -> TicketRepository:
    """Get ticket repository instance."""
    return SQLAlchemyTicketRepository(db, Ticket)


def get_identity_service(
    context: ServiceContext = Depends(get_context),
    users: UserRepository = Depends(get_user_repository),
) -> IdentityService:
    return IdentityService(users, context.hasher, context.signer, context.clock)


def get_ticket_service(
    context: ServiceContext = Depends(get_context),
    tickets: TicketRepository = Depends(get_ticket_repository),
    users: UserRepository = Depends(get_user_repository),
) -> TicketService:
    return TicketService(tickets, users, context.clock)


def get_admin_service(
    users: UserRepository = Depends(get_user_repository),
    tickets: TicketRepository = Depends(get_ticket_repository),
) -> AdminService:
    return AdminService(users, tickets)
