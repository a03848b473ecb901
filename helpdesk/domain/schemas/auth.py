"""Pydantic schemas for User and Auth."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from helpdesk.domain.enums import Role


class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = Field(default=None, alias="fullName")

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    """User as returned alongside a session token."""
    id: int
    email: str
    full_name: str = Field(default="", alias="fullName")
    role: Role

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class UserRead(BaseModel):
    """User as listed to administrators; never carries the credential."""
    id: int
    email: str
    full_name: str
    role: Role
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    token: str
    user: UserPublic


@dataclass(frozen=True)
class Actor:
    """Identity asserted by a verified session token."""
    id: int
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
