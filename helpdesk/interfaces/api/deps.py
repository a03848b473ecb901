"""FastAPI dependency — bearer token authentication."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from helpdesk.application.services import authorization
from helpdesk.application.services.auth_service import actor_from_token
from helpdesk.core.context import ServiceContext
from helpdesk.domain.schemas.auth import Actor
from helpdesk.interfaces.deps import get_context

security = HTTPBearer(auto_error=False)


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    context: ServiceContext = Depends(get_context),
) -> Actor:
    """Resolve the caller from the JWT claims; no database round-trip."""
    token = credentials.credentials if credentials else None
    return actor_from_token(context.signer, token)


def require_admin(actor: Actor = Depends(get_current_actor)) -> Actor:
    """Require admin role."""
    authorization.require_admin(actor)
    return actor
