"""Closed value sets shared by models, schemas and services."""

from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


class TicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Statuses only an administrator may move a ticket into
ADMIN_ONLY_STATUSES = frozenset({TicketStatus.RESOLVED, TicketStatus.CLOSED})
