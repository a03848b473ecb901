"""Ticket service — creation, scoped listing and gated updates."""

from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional

import structlog

from helpdesk.application.services import authorization
from helpdesk.core.exceptions import NotFoundError, StoreError, ValidationError
from helpdesk.domain.enums import TicketPriority, TicketStatus
from helpdesk.domain.repositories.ticket_repository import TicketRepository
from helpdesk.domain.repositories.user_repository import UserRepository
from helpdesk.domain.schemas.auth import Actor
from helpdesk.domain.schemas.ticket import TicketView

logger = structlog.get_logger(__name__)


class TicketService:
    def __init__(
        self,
        tickets: TicketRepository,
        users: UserRepository,
        clock: Callable[[], datetime],
    ):
        self.tickets = tickets
        self.users = users
        self.clock = clock

    def _view(self, ticket_id: int) -> TicketView:
        view = self.tickets.get_view(ticket_id)
        if view is None:
            # Just written in this session; a miss means the store is inconsistent
            raise StoreError("Failed to fetch ticket")
        return view

    def create(
        self,
        actor: Actor,
        title: Optional[str],
        description: Optional[str],
        priority: TicketPriority = TicketPriority.MEDIUM,
    ) -> TicketView:
        title = (title or "").strip()
        description = (description or "").strip()
        if not title or not description:
            raise ValidationError(
                "Title and description are required",
                details={"fields": {
                    name: "required"
                    for name, value in (("title", title), ("description", description))
                    if not value
                }},
            )

        now = self.clock()
        ticket = self.tickets.create({
            "title": title,
            "description": description,
            "priority": TicketPriority(priority),
            "status": TicketStatus.OPEN,
            "user_id": actor.id,
            "created_at": now,
            "updated_at": now,
        })
        logger.info("Ticket created", ticket_id=ticket.id, user_id=actor.id, priority=ticket.priority.value)
        return self._view(ticket.id)

    def list(self, actor: Actor) -> List[TicketView]:
        return self.tickets.list_views(owner_id=authorization.ticket_scope(actor))

    def update(self, actor: Actor, ticket_id: int, changes: Mapping[str, Any]) -> TicketView:
        ticket = self.tickets.get_by_id(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket", ticket_id)

        permitted = authorization.authorize_update(actor, ticket.user_id, changes)

        assignee_id = permitted.get("assigned_to")
        if assignee_id is not None and self.users.get_by_id(assignee_id) is None:
            raise NotFoundError("User", assignee_id)

        # Never move updated_at backwards, even if the clock does
        now = self.clock()
        permitted["updated_at"] = max(now, ticket.updated_at, ticket.created_at)

        self.tickets.update(ticket, permitted)
        logger.info(
            "Ticket updated",
            ticket_id=ticket_id,
            actor_id=actor.id,
            fields=sorted(k for k in permitted if k != "updated_at"),
        )
        return self._view(ticket_id)
