"""Ticket domain model — maps to the 'tickets' table."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text

from helpdesk.domain.enums import TicketPriority, TicketStatus
from helpdesk.domain.models.user import enum_values
from helpdesk.infrastructure.database import Base


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        Enum(TicketStatus, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=TicketStatus.OPEN,
        index=True,
    )
    priority = Column(
        Enum(TicketPriority, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=TicketPriority.MEDIUM,
    )

    # Owner never changes; assignee is admin-controlled
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    assigned_to = Column(Integer, ForeignKey("users.id"), nullable=True)

    created_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Ticket {self.id} [{self.status}] {self.title}>"
