"""
Business logic for users.

Users are static: they are loaded with the store and never change, so
the service only offers lookups.
"""

from typing import List, Optional

from ..core.store import IssueStore, User
from ..schemas.user import UserRead


class UserService:
    """Read‑only access to the user set of a store."""

    @staticmethod
    def find_user(store: IssueStore, user_id: int) -> Optional[User]:
        """Return the user with ``user_id`` or ``None`` if there is none."""
        for user in store.users:
            if user.id == user_id:
                return user
        return None

    @classmethod
    async def list_users(cls, store: IssueStore) -> List[UserRead]:
        """Return all users in their original order."""
        return [UserRead.model_validate(user) for user in store.users]
