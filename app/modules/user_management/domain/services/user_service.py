# 📄 File: app/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# Looks after people's profiles once they have an account: showing a profile, letting
# someone edit their details or photo, and finding other people by name or email.
# 🧪 Purpose (Technical Summary):
# Domain service for profile reads and whitelisted profile updates, user lookup and
# profile photo replacement through the storage client.
# 🔗 Dependencies:
# UserRepository, storage client, app.shared.utils validators and helpers
# 🔄 Connected Modules / Calls From:
# users API endpoints, group services (member listings)

import logging
from typing import Any, Dict, List, Tuple
from uuid import UUID

from fastapi import Depends

from app.modules.user_management.domain.models.user import Gender, User, UserLocation
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import NotFoundError, ValidationError
from app.shared.infrastructure.storage.supabase_storage import (
    SupabaseStorageClient,
    get_storage_client,
)
from app.shared.utils.helpers import page_window, total_pages
from app.shared.utils.validators import validate_allowed_updates

logger = logging.getLogger(__name__)

# Fields a user may change through the profile edit endpoint
PROFILE_UPDATABLE_FIELDS = {"full_name", "bio", "gender", "location", "birthday", "interests"}


class UserService:
    """
    Domain service for user profile business logic.
    """

    def __init__(
        self,
        user_repository: UserRepository = Depends(),
        storage: SupabaseStorageClient = Depends(get_storage_client),
    ):
        self.user_repository = user_repository
        self.storage = storage

    async def get_by_unique_url(self, unique_url: str) -> User:
        user = await self.user_repository.get_by_unique_url(unique_url)
        if user is None:
            raise NotFoundError("User", unique_url)
        return user

    async def get_by_id(self, user_id: UUID) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def update_profile(self, user: User, updates: Dict[str, Any]) -> User:
        """
        Apply a whitelisted profile update.

        Args:
            user: The authenticated user
            updates: Field name -> new value, snake_case keys

        Raises:
            ValidationError: If any key is outside the whitelist or a value is invalid
        """
        validate_allowed_updates(updates, PROFILE_UPDATABLE_FIELDS)

        for field, value in updates.items():
            if field == "full_name":
                if not value or not str(value).strip():
                    raise ValidationError("Full name cannot be empty", field="fullName")
                user.full_name = str(value).strip()
            elif field == "gender":
                user.gender = Gender(value)
            elif field == "location":
                user.location = UserLocation(**value) if value else None
            elif field == "interests":
                user.interests = [UUID(str(v)) for v in (value or [])]
            else:
                setattr(user, field, value)

        user.touch()
        updated = await self.user_repository.update(user)
        logger.info(f"Profile updated for user {user.user_id}: {sorted(updates)}")
        return updated

    async def upload_profile_photo(self, user: User, image_base64: str, file_name: str) -> User:
        """Store a new profile photo and drop the previous stored object."""
        user.profile_photo = await self.storage.replace_image(
            user.profile_photo, image_base64, file_name, "profiles"
        )
        user.touch()
        return await self.user_repository.update(user)

    async def find_users(self, query: str, page: int, limit: int) -> Tuple[List[User], int]:
        """
        Case-insensitive search on email or full name.

        Returns:
            (users on the page, total page count)
        """
        if not query or not query.strip():
            raise ValidationError("Search query is required", field="query")
        offset, limit = page_window(page, limit)
        users, total = await self.user_repository.search(query, offset, limit)
        return users, total_pages(total, limit)
