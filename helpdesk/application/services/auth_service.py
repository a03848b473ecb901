"""Identity service — registration, login, session tokens and the admin seed."""

from datetime import datetime
from typing import Callable, Optional

import structlog

from helpdesk.core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from helpdesk.domain.enums import Role
from helpdesk.domain.models.user import User
from helpdesk.domain.repositories.user_repository import UserRepository
from helpdesk.domain.schemas.auth import Actor, TokenResponse, UserPublic
from helpdesk.infrastructure.security import PasswordHasher, TokenSigner

logger = structlog.get_logger(__name__)


def actor_from_token(signer: TokenSigner, token: Optional[str]) -> Actor:
    """Resolve a bearer token into the acting identity."""
    if not token:
        raise AuthenticationError("Access token required")

    claims = signer.verify(token)
    try:
        return Actor(
            id=int(claims["id"]),
            email=str(claims["email"]),
            role=Role(claims["role"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise AuthenticationError("Invalid token") from exc


class IdentityService:
    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        signer: TokenSigner,
        clock: Callable[[], datetime],
    ):
        self.users = users
        self.hasher = hasher
        self.signer = signer
        self.clock = clock

    def issue_token(self, user: User) -> str:
        role = Role(user.role)
        return self.signer.sign({
            "sub": str(user.id),
            "id": user.id,
            "email": user.email,
            "role": role.value,
        })

    def _session(self, user: User) -> TokenResponse:
        public = UserPublic(id=user.id, email=user.email, full_name=user.full_name or "", role=user.role)
        return TokenResponse(token=self.issue_token(user), user=public)

    def _create_user(self, email: str, password: str, full_name: str, role: Role) -> User:
        return self.users.create({
            "email": email,
            "password_hash": self.hasher.hash(password),
            "full_name": full_name,
            "role": role,
            "created_at": self.clock(),
        })

    def register(self, email: Optional[str], password: Optional[str], full_name: Optional[str] = None) -> TokenResponse:
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError(
                "Email and password are required",
                details={"fields": {
                    name: "required" for name, value in (("email", email), ("password", password)) if not value
                }},
            )

        if self.users.get_by_email(email):
            raise ConflictError("Email already exists")

        user = self._create_user(email, password, full_name or "", Role.USER)
        logger.info("User registered", user_id=user.id, email=user.email)
        return self._session(user)

    def login(self, email: Optional[str], password: Optional[str]) -> TokenResponse:
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.users.get_by_email(email)
        if not user or not self.hasher.verify(password, user.password_hash):
            logger.warning("Login failed", email=email)
            raise AuthenticationError("Invalid credentials")

        logger.info("User logged in", user_id=user.id)
        return self._session(user)

    def get_user(self, actor: Actor) -> User:
        user = self.users.get_by_id(actor.id)
        if user is None:
            raise NotFoundError("User", actor.id)
        return user

    def bootstrap_admin(self, email: str, password: str, full_name: str) -> bool:
        """Create the administrator account unless the email is taken.

        Returns True when a user was created.
        """
        if self.users.get_by_email(email):
            return False
        self._create_user(email, password, full_name, Role.ADMIN)
        logger.info("Default admin user created", email=email)
        return True
