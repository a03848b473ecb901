"""Authorization gate — who may see and change which tickets.

Pure decisions: nothing here touches the database.
"""

from typing import Any, Mapping, Optional

import structlog

from helpdesk.core.exceptions import AuthorizationError
from helpdesk.domain.enums import ADMIN_ONLY_STATUSES, TicketStatus
from helpdesk.domain.schemas.auth import Actor

logger = structlog.get_logger(__name__)

MUTABLE_FIELDS = ("status", "assigned_to", "priority")


def ticket_scope(actor: Actor) -> Optional[int]:
    """Owner id to restrict ticket listings to, or None for every ticket."""
    if actor.is_admin:
        return None
    return actor.id


def require_admin(actor: Actor) -> None:
    if not actor.is_admin:
        logger.warning("Admin access denied", actor_id=actor.id)
        raise AuthorizationError("Admin access required")


def authorize_update(actor: Actor, owner_id: int, changes: Mapping[str, Any]) -> dict:
    """Check a ticket mutation and return the changes to apply.

    Only admins and the owner may mutate. Assigning (any value, null
    included) and moving to resolved/closed are admin-only, even for the
    owner.
    """
    if not actor.is_admin and owner_id != actor.id:
        logger.warning("Ticket update denied", actor_id=actor.id, reason="not owner")
        raise AuthorizationError("Not authorized to update this ticket")

    permitted = {field: changes[field] for field in MUTABLE_FIELDS if field in changes}

    if not actor.is_admin:
        status = permitted.get("status")
        if "assigned_to" in permitted or (status is not None and TicketStatus(status) in ADMIN_ONLY_STATUSES):
            logger.warning("Ticket update denied", actor_id=actor.id, reason="admin only")
            raise AuthorizationError("Admin access required for this action")

    return permitted
