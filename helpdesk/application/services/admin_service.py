"""Admin reporting — user directory and ticket statistics."""

from typing import List

from helpdesk.domain.repositories.ticket_repository import TicketRepository
from helpdesk.domain.repositories.user_repository import UserRepository
from helpdesk.domain.schemas.admin import TicketStats
from helpdesk.domain.schemas.auth import UserRead


class AdminService:
    def __init__(self, users: UserRepository, tickets: TicketRepository):
        self.users = users
        self.tickets = tickets

    def list_users(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.users.list_newest_first()]

    def stats(self) -> TicketStats:
        return TicketStats(
            tickets_by_status=self.tickets.count_by_status(),
            total_users=self.users.count(),
            total_tickets=self.tickets.count(),
        )
