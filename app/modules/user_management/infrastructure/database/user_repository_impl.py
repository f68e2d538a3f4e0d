# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for user accounts: creating people, finding them,
# saving profile changes, and remembering which sign-in tokens are still valid.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the UserRepository interface using SQLAlchemy async ORM,
# mapping UserModel rows (plus token, interest and invitation rows) to User entities.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.user_repository (interface)
# - app.modules.user_management.domain.models.user (domain model)
# - app.modules.user_management.infrastructure.database.models (SQLAlchemy models)
#
# 🔄 Connected Modules / Calls From:
# - app.main dependency override for UserRepository
# - auth and profile services, auth gate dependency

"""
User Repository Implementation

Handles the mapping between domain User entities and UserModel records.
All writes flush so constraint violations surface inside the request; the
request's session dependency commits.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, func, insert, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.user import (
    Gender,
    ModeratorInvitation,
    User,
    UserLocation,
)
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.database.models import (
    ModeratorInvitationModel,
    UserModel,
    UserTokenModel,
    user_interests,
)
from app.shared.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.shared.core.value_objects import ImageProvider, ImageRef
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc, escape_like

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, user: User) -> User:
        if await self._get_model_by_email(user.email):
            raise ConflictError("Email is already registered", "EMAIL_TAKEN")

        user_model = UserModel()
        self._apply_domain(user_model, user)
        user_model.user_id = user.user_id
        user_model.created_at = user.created_at
        self._session.add(user_model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(f"User creation failed - duplicate email: {user.email}")
            raise ConflictError("Email is already registered", "EMAIL_TAKEN") from e

        await self._replace_interests(user.user_id, user.interests)
        logger.info(f"Created user with ID: {user_model.user_id}")
        return await self._to_domain(user_model)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        user_model = await self._session.get(UserModel, user_id)
        return await self._to_domain(user_model) if user_model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        user_model = await self._get_model_by_email(email)
        return await self._to_domain(user_model) if user_model else None

    async def get_by_unique_url(self, unique_url: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.unique_url == unique_url)
        user_model = (await self._session.execute(stmt)).scalar_one_or_none()
        return await self._to_domain(user_model) if user_model else None

    async def get_many(self, user_ids: Sequence[UUID]) -> List[User]:
        if not user_ids:
            return []
        stmt = select(UserModel).where(UserModel.user_id.in_(list(user_ids)))
        models = (await self._session.execute(stmt)).scalars().all()
        by_id = {m.user_id: m for m in models}
        # Keep the caller's ordering
        return [self._model_to_domain(by_id[uid]) for uid in user_ids if uid in by_id]

    async def update(self, user: User) -> User:
        user_model = await self._session.get(UserModel, user.user_id)
        if user_model is None:
            raise NotFoundError("User", str(user.user_id))

        self._apply_domain(user_model, user)
        try:
            await self._replace_interests(user.user_id, user.interests)
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(f"User update rejected by constraints: {user.user_id}")
            raise ValidationError("Unknown interest category", field="interests") from e
        logger.debug(f"Updated user: {user.user_id}")
        return await self._to_domain(user_model)

    async def search(self, query: str, offset: int, limit: int) -> Tuple[List[User], int]:
        pattern = f"%{escape_like(query.strip())}%"
        condition = or_(
            UserModel.email.ilike(pattern, escape="\\"),
            UserModel.full_name.ilike(pattern, escape="\\"),
        )

        total = (await self._session.execute(
            select(func.count()).select_from(UserModel).where(condition)
        )).scalar_one()

        stmt = (
            select(UserModel)
            .where(condition)
            .order_by(UserModel.full_name, UserModel.user_id)
            .offset(offset)
            .limit(limit)
        )
        models = (await self._session.execute(stmt)).scalars().all()
        return [self._model_to_domain(m) for m in models], total

    # =========================================================================
    # SESSION TOKENS
    # =========================================================================

    async def add_token(self, user_id: UUID, token: str) -> None:
        self._session.add(UserTokenModel(user_id=user_id, token=token))
        await self._session.flush()

    async def get_by_token(self, user_id: UUID, token: str) -> Optional[User]:
        stmt = (
            select(UserModel)
            .join(UserTokenModel, UserTokenModel.user_id == UserModel.user_id)
            .where(UserModel.user_id == user_id, UserTokenModel.token == token)
        )
        user_model = (await self._session.execute(stmt)).scalar_one_or_none()
        return await self._to_domain(user_model) if user_model else None

    async def remove_token(self, user_id: UUID, token: str) -> bool:
        result = await self._session.execute(
            delete(UserTokenModel).where(
                UserTokenModel.user_id == user_id,
                UserTokenModel.token == token,
            )
        )
        return result.rowcount > 0

    async def remove_all_tokens(self, user_id: UUID) -> int:
        result = await self._session.execute(
            delete(UserTokenModel).where(UserTokenModel.user_id == user_id)
        )
        return result.rowcount

    # =========================================================================
    # MAPPING
    # =========================================================================

    async def _get_model_by_email(self, email: str) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def _replace_interests(self, user_id: UUID, category_ids: List[UUID]) -> None:
        await self._session.execute(
            delete(user_interests).where(user_interests.c.user_id == user_id)
        )
        unique_ids = list(dict.fromkeys(category_ids))
        if unique_ids:
            await self._session.execute(
                insert(user_interests),
                [{"user_id": user_id, "category_id": cid} for cid in unique_ids],
            )

    async def _to_domain(self, user_model: UserModel) -> User:
        """Map a row plus its interests and pending invitations."""
        interests = (await self._session.execute(
            select(user_interests.c.category_id).where(user_interests.c.user_id == user_model.user_id)
        )).scalars().all()

        invitation_rows = (await self._session.execute(
            select(ModeratorInvitationModel)
            .where(ModeratorInvitationModel.user_id == user_model.user_id)
            .order_by(ModeratorInvitationModel.sent_at)
        )).scalars().all()

        user = self._model_to_domain(user_model)
        user.interests = list(interests)
        user.moderator_invitations = [
            ModeratorInvitation(group_id=row.group_id, sent_at=ensure_utc(row.sent_at))
            for row in invitation_rows
        ]
        return user

    def _model_to_domain(self, user_model: UserModel) -> User:
        """
        Convert a UserModel to a domain User entity (without interests or invitations).
        """
        profile_photo = None
        if user_model.photo_url:
            profile_photo = ImageRef(
                provider=ImageProvider(user_model.photo_provider),
                key=user_model.photo_key,
                url=user_model.photo_url,
            )

        location = None
        if user_model.location_city or user_model.location_lat is not None:
            location = UserLocation(
                city=user_model.location_city,
                lat=user_model.location_lat,
                lng=user_model.location_lng,
            )

        return User(
            user_id=user_model.user_id,
            full_name=user_model.full_name,
            email=user_model.email,
            unique_url=user_model.unique_url,
            bio=user_model.bio,
            password_hash=user_model.password_hash,
            gender=Gender(user_model.gender),
            is_admin=user_model.is_admin,
            is_verified=user_model.is_verified,
            is_active=user_model.is_active,
            is_email_confirmed=user_model.is_email_confirmed,
            profile_photo=profile_photo,
            location=location,
            birthday=user_model.birthday,
            email_confirm_token=user_model.email_confirm_token,
            password_reset_token=user_model.password_reset_token,
            created_at=ensure_utc(user_model.created_at),
            updated_at=ensure_utc(user_model.updated_at),
        )

    def _apply_domain(self, user_model: UserModel, user: User) -> None:
        """Copy every mutable field of the entity onto the row."""
        fields: Dict[str, object] = {
            "full_name": user.full_name,
            "email": user.email.lower(),
            "unique_url": user.unique_url,
            "bio": user.bio,
            "password_hash": user.password_hash,
            "gender": user.gender.value,
            "is_admin": user.is_admin,
            "is_verified": user.is_verified,
            "is_active": user.is_active,
            "is_email_confirmed": user.is_email_confirmed,
            "photo_provider": user.profile_photo.provider.value if user.profile_photo else None,
            "photo_key": user.profile_photo.key if user.profile_photo else None,
            "photo_url": user.profile_photo.url if user.profile_photo else None,
            "location_city": user.location.city if user.location else None,
            "location_lat": user.location.lat if user.location else None,
            "location_lng": user.location.lng if user.location else None,
            "birthday": user.birthday,
            "email_confirm_token": user.email_confirm_token,
            "password_reset_token": user.password_reset_token,
            "updated_at": user.updated_at,
        }
        for name, value in fields.items():
            setattr(user_model, name, value)
