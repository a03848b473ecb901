"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, DateTime, Enum, Integer, String

from helpdesk.domain.enums import Role
from helpdesk.infrastructure.database import Base


def enum_values(enum_cls):
    return [member.value for member in enum_cls]


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(200), nullable=False, default="")
    role = Column(
        Enum(Role, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=Role.USER,
    )
    created_at = Column(DateTime, nullable=False)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __repr__(self):
        return f"<User {self.email}>"
