"""
SQLAlchemy Implementation of Ticket Repository.
"""

from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import aliased

from helpdesk.domain.models.ticket import Ticket
from helpdesk.domain.models.user import User
from helpdesk.domain.repositories.ticket_repository import TicketRepository
from helpdesk.domain.schemas.ticket import TicketView
from helpdesk.infrastructure.repositories.base_repository import SQLAlchemyRepository

Owner = aliased(User, name="owner")
Assignee = aliased(User, name="assignee")


class SQLAlchemyTicketRepository(SQLAlchemyRepository[Ticket], TicketRepository):
    """Ticket repository implementation using SQLAlchemy."""

    def _view_query(self):
        return (
            self.db.query(
                Ticket,
                Owner.full_name.label("user_name"),
                Owner.email.label("user_email"),
                Assignee.full_name.label("assigned_name"),
            )
            .join(Owner, Ticket.user_id == Owner.id)
            .outerjoin(Assignee, Ticket.assigned_to == Assignee.id)
        )

    @staticmethod
    def _to_view(row) -> TicketView:
        ticket = row[0]
        return TicketView(
            id=ticket.id,
            title=ticket.title,
            description=ticket.description,
            status=ticket.status,
            priority=ticket.priority,
            user_id=ticket.user_id,
            assigned_to=ticket.assigned_to,
            user_name=row.user_name or "",
            user_email=row.user_email,
            assigned_name=row.assigned_name,
            created_at=ticket.created_at,
            updated_at=ticket.updated_at,
        )

    def get_view(self, ticket_id: int) -> Optional[TicketView]:
        row = self._view_query().filter(Ticket.id == ticket_id).first()
        return self._to_view(row) if row else None

    def list_views(self, owner_id: Optional[int] = None) -> List[TicketView]:
        query = self._view_query()
        if owner_id is not None:
            query = query.filter(Ticket.user_id == owner_id)
        rows = query.order_by(Ticket.created_at.desc(), Ticket.id.desc()).all()
        return [self._to_view(row) for row in rows]

    def count_by_status(self) -> Dict[str, int]:
        results = (
            self.db.query(Ticket.status, func.count(Ticket.id).label("count"))
            .group_by(Ticket.status)
            .all()
        )
        return {r.status.value: r.count for r in results}
