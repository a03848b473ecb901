"""Auth API routes — register, login, me."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from helpdesk.application.services.auth_service import IdentityService
from helpdesk.domain.schemas.auth import Actor, LoginRequest, RegisterRequest, TokenResponse, UserRead
from helpdesk.interfaces.api.deps import get_current_actor
from helpdesk.interfaces.deps import get_db, get_identity_service

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=TokenResponse)
def register(
    body: RegisterRequest,
    db: Session = Depends(get_db),
    service: IdentityService = Depends(get_identity_service),
):
    session = service.register(body.email, body.password, body.full_name)
    db.commit()
    return session


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, service: IdentityService = Depends(get_identity_service)):
    return service.login(body.email, body.password)


@router.get("/me", response_model=UserRead)
def get_me(
    actor: Actor = Depends(get_current_actor),
    service: IdentityService = Depends(get_identity_service),
):
    return UserRead.model_validate(service.get_user(actor))
