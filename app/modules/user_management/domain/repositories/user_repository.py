# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes every way the app is allowed to save and look up user accounts and
# their sign-in tokens, without saying which database does the work.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for the User aggregate, its session tokens and
# its interests, following the Repository pattern.
# 🔗 Dependencies:
# abc, typing, uuid, domain User model
# 🔄 Connected Modules / Calls From:
# auth_service.py, user_service.py, presentation dependencies (auth gate),
# infrastructure user_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from app.modules.user_management.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository interface for User entity operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not database models
    - Writes are flushed, never committed; the caller's unit of work commits
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Raises:
            ConflictError: If a user with the email already exists
        """

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID, None when missing."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (case-insensitive) email."""

    @abstractmethod
    async def get_by_unique_url(self, unique_url: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_many(self, user_ids: Sequence[UUID]) -> List[User]:
        """Load several users; missing ids are skipped."""

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist every mutable field of ``user``, including interests.

        Raises:
            NotFoundError: If the user no longer exists
        """

    @abstractmethod
    async def search(self, query: str, offset: int, limit: int) -> Tuple[List[User], int]:
        """
        Case-insensitive match on email or full name.

        Returns:
            (page of users ordered by full name, total match count)
        """

    # =========================================================================
    # SESSION TOKENS
    # =========================================================================

    @abstractmethod
    async def add_token(self, user_id: UUID, token: str) -> None:
        pass

    @abstractmethod
    async def get_by_token(self, user_id: UUID, token: str) -> Optional[User]:
        """Find the user only if ``token`` is currently stored for them."""

    @abstractmethod
    async def remove_token(self, user_id: UUID, token: str) -> bool:
        pass

    @abstractmethod
    async def remove_all_tokens(self, user_id: UUID) -> int:
        """Remove every session token; returns how many were removed."""
