"""Admin API routes — user directory and stats."""

from typing import List

from fastapi import APIRouter, Depends

from helpdesk.application.services.admin_service import AdminService
from helpdesk.domain.schemas.admin import TicketStats
from helpdesk.domain.schemas.auth import Actor, UserRead
from helpdesk.interfaces.api.deps import require_admin
from helpdesk.interfaces.deps import get_admin_service

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/users", response_model=List[UserRead])
def list_users(
    actor: Actor = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
):
    return service.list_users()


@router.get("/stats", response_model=TicketStats)
def stats(
    actor: Actor = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
):
    return service.stats()
