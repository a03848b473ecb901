"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError

from helpdesk.core.exceptions import ConflictError
from helpdesk.domain.models.user import User
from helpdesk.domain.repositories.user_repository import UserRepository
from helpdesk.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def list_newest_first(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

    def create(self, obj_in: Any) -> User:
        # The unique index is the final word when two registrations race
        try:
            return super().create(obj_in)
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("Email already exists") from exc
