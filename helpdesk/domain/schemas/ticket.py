"""Pydantic schemas for Ticket."""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from helpdesk.domain.enums import TicketPriority, TicketStatus


class TicketCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: TicketPriority = TicketPriority.MEDIUM


class TicketUpdate(BaseModel):
    """Partial update; only fields present in the request are applied."""
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    assigned_to: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("assigned_to", "assignedTo"),
    )

    model_config = ConfigDict(extra="ignore")

    def changes(self) -> dict:
        """Fields the caller actually sent.

        ``assigned_to`` counts even when null (unassign); status and priority
        are ignored when null.
        """
        sent = self.model_fields_set
        result = {}
        if "status" in sent and self.status is not None:
            result["status"] = self.status
        if "priority" in sent and self.priority is not None:
            result["priority"] = self.priority
        if "assigned_to" in sent:
            result["assigned_to"] = self.assigned_to
        return result


class TicketView(BaseModel):
    """Ticket joined with owner and assignee display data."""
    id: int
    title: str
    description: str
    status: TicketStatus
    priority: TicketPriority
    user_id: int
    assigned_to: Optional[int] = None
    user_name: str = ""
    user_email: str
    assigned_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
