"""Ticket API routes — list, create, update."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from helpdesk.application.services.ticket_service import TicketService
from helpdesk.domain.schemas.auth import Actor
from helpdesk.domain.schemas.ticket import TicketCreate, TicketUpdate, TicketView
from helpdesk.interfaces.api.deps import get_current_actor
from helpdesk.interfaces.deps import get_db, get_ticket_service

router = APIRouter(prefix="/api/tickets", tags=["Tickets"])


@router.get("", response_model=List[TicketView])
def list_tickets(
    actor: Actor = Depends(get_current_actor),
    service: TicketService = Depends(get_ticket_service),
):
    """Every ticket for admins; only the caller's own tickets otherwise."""
    return service.list(actor)


@router.post("", response_model=TicketView, status_code=status.HTTP_201_CREATED)
def create_ticket(
    body: TicketCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
    service: TicketService = Depends(get_ticket_service),
):
    ticket = service.create(actor, body.title, body.description, body.priority)
    db.commit()
    return ticket


@router.put("/{ticket_id}", response_model=TicketView)
@router.patch("/{ticket_id}", response_model=TicketView)
def update_ticket(
    ticket_id: int,
    body: TicketUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
    service: TicketService = Depends(get_ticket_service),
):
    """Apply the fields present in the body (status, assigned_to, priority)."""
    ticket = service.update(actor, ticket_id, body.changes())
    db.commit()
    return ticket
