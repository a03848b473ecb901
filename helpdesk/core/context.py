"""Service context — everything a request needs, built once per application."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from helpdesk.config import Settings
from helpdesk.infrastructure.database import Database
from helpdesk.infrastructure.security import PasswordHasher, TokenSigner


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class ServiceContext:
    settings: Settings
    database: Database
    hasher: PasswordHasher
    signer: TokenSigner
    clock: Callable[[], datetime] = field(default=utcnow)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceContext":
        return cls(
            settings=settings,
            database=Database(settings.DATABASE_URL),
            hasher=PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
            signer=TokenSigner(
                secret_key=settings.SECRET_KEY,
                algorithm=settings.JWT_ALGORITHM,
                ttl_minutes=settings.JWT_EXPIRATION_MINUTES,
            ),
        )
