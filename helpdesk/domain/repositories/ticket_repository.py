"""
Ticket Repository Interface.
Ticket store: ticket records plus the joined owner/assignee view.
"""

from typing import Dict, List, Optional

from helpdesk.domain.models.ticket import Ticket
from helpdesk.domain.repositories.base import BaseRepository
from helpdesk.domain.schemas.ticket import TicketView


class TicketRepository(BaseRepository[Ticket]):
    """Interface for Ticket-specific operations."""

    def get_view(self, ticket_id: int) -> Optional[TicketView]:
        """Get one ticket joined with owner and assignee display data."""
        ...

    def list_views(self, owner_id: Optional[int] = None) -> List[TicketView]:
        """Joined tickets, newest first; restricted to one owner when given."""
        ...

    def count_by_status(self) -> Dict[str, int]:
        """Ticket counts for each status that has at least one ticket."""
        ...
