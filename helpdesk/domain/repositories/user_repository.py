"""
User Repository Interface.
Credential store: user records with unique emails.
"""

from typing import List, Optional

from helpdesk.domain.models.user import User
from helpdesk.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by exact email."""
        ...

    def list_newest_first(self) -> List[User]:
        """All users ordered by creation time, newest first."""
        ...
