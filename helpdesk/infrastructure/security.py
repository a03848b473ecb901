"""Password hashing (passlib/bcrypt) and session token signing (python-jose)."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError, PasswordValueError

from helpdesk.core.exceptions import AuthenticationError, ValidationError


class PasswordHasher:
    """One-way salted hashing with a fixed bcrypt cost factor."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        try:
            return self._context.hash(password)
        except PasswordSizeError as exc:
            raise ValidationError(
                "Password is too long",
                details={"fields": {"password": f"at most {exc.max_size} characters"}},
            ) from exc
        except PasswordValueError as exc:
            raise ValidationError(
                "Password contains unsupported characters",
                details={"fields": {"password": "must not contain NUL characters"}},
            ) from exc

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError:
            # Malformed stored hash
            return False


class TokenSigner:
    """Signs and verifies time-limited JWT claims."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl_minutes: int = 60 * 24):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = timedelta(minutes=ttl_minutes)

    def sign(self, claims: dict, ttl: Optional[timedelta] = None) -> str:
        to_encode = claims.copy()
        expire = datetime.now(timezone.utc) + (ttl if ttl is not None else self.ttl)
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise AuthenticationError("Token expired") from exc
        except JWTError as exc:
            raise AuthenticationError("Invalid token") from exc
