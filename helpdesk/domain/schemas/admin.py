"""Pydantic schemas for admin reporting."""

from pydantic import BaseModel, ConfigDict, Field


class TicketStats(BaseModel):
    tickets_by_status: dict[str, int] = Field(alias="ticketsByStatus")
    total_users: int = Field(alias="totalUsers")
    total_tickets: int = Field(alias="totalTickets")

    model_config = ConfigDict(populate_by_name=True)
