# 📄 File: app/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Handles signing up, logging in and out, confirming email addresses, resetting forgotten
# passwords and signing in with Google.
# 🧪 Purpose (Technical Summary):
# Domain service implementing credential checks, session-token issuance and revocation,
# one-time email token flows and OAuth login-or-register.
# 🔗 Dependencies:
# Domain models, UserRepository, app.shared.core.security, email service, OAuth provider
# 🔄 Connected Modules / Calls From:
# Application command handlers, auth API endpoints, presentation auth gate

import logging
from typing import Optional, Tuple
from uuid import UUID

from fastapi import Depends

from app.modules.user_management.domain.models.user import Gender, User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.external.oauth_providers import (
    GoogleOAuthProvider,
    get_google_oauth_provider,
)
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)
from app.shared.core.security import SecurityManager, get_security_manager
from app.shared.core.value_objects import ImageProvider, ImageRef
from app.shared.infrastructure.email.email_service import EmailService, get_email_service
from app.shared.utils.validators import validate_password_length

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Unable to login"


class AuthService:
    """
    Domain service for authentication business logic.

    Business rules:
    - Email addresses are unique and compared lowercased
    - Passwords are at least PASSWORD_MIN_LENGTH characters
    - A session token is valid only while it is stored for its user
    - Confirmation and reset tokens are single-use and expire
    - Email delivery is best-effort and never fails the request
    """

    def __init__(
        self,
        user_repository: UserRepository = Depends(),
        security: SecurityManager = Depends(get_security_manager),
        email_service: EmailService = Depends(get_email_service),
        oauth_provider: GoogleOAuthProvider = Depends(get_google_oauth_provider),
        settings: Settings = Depends(get_settings),
    ):
        self.user_repository = user_repository
        self.security = security
        self.email_service = email_service
        self.oauth_provider = oauth_provider
        self.settings = settings

    # =========================================================================
    # REGISTRATION & LOGIN
    # =========================================================================

    async def register(
        self,
        full_name: str,
        email: str,
        password: str,
        gender: Gender = Gender.UNSPECIFIED
    ) -> Tuple[User, str]:
        """
        Create an account, sign it in and send the confirmation email.

        Returns:
            (created user, session token)

        Raises:
            ValidationError: If the password is too short
            ConflictError: If the email is already registered
        """
        validate_password_length(password, self.settings.PASSWORD_MIN_LENGTH)

        if await self.user_repository.get_by_email(email):
            raise ConflictError("Email is already registered", "EMAIL_TAKEN")

        user = User.create_new_user(
            full_name=full_name,
            email=email,
            password_hash=self.security.get_password_hash(password),
            gender=gender,
        )
        user = await self.user_repository.create(user)
        token = await self.issue_session(user)

        await self.send_confirmation_email(user)
        logger.info(f"✅ User registered: {user.user_id}")
        return user, token

    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        Validate credentials and issue a session token.

        Unknown email and wrong password fail identically.
        """
        user = await self.user_repository.get_by_email(email)
        if not user or not self.security.verify_password(password, user.password_hash):
            logger.info("Login failed")
            raise ValidationError(LOGIN_FAILED_MESSAGE)
        if not user.is_active:
            raise AuthorizationError("This account has been deactivated")

        token = await self.issue_session(user)
        logger.info(f"User logged in: {user.user_id}")
        return user, token

    async def issue_session(self, user: User) -> str:
        token = self.security.create_session_token(str(user.user_id))
        await self.user_repository.add_token(user.user_id, token)
        return token

    async def google_authenticate(self, code: str) -> Tuple[User, str, bool]:
        """
        Log in with a Google authorization code, registering on first use.

        Returns:
            (user, session token, created flag)
        """
        if not self.oauth_provider.is_configured:
            raise ExternalServiceError("google", "Google sign-in is not configured")

        identity = await self.oauth_provider.authenticate(code)
        if identity is None:
            raise ExternalServiceError("google", "Something went wrong with Google authentication")

        created = False
        user = await self.user_repository.get_by_email(identity.email)
        if user is None:
            photo = None
            if identity.picture:
                photo = ImageRef(provider=ImageProvider.GOOGLE, url=identity.picture)
            user = User.create_new_user(
                full_name=identity.full_name,
                email=identity.email,
                is_email_confirmed=True,
                profile_photo=photo,
            )
            user = await self.user_repository.create(user)
            created = True
            logger.info(f"✅ User registered via Google: {user.user_id}")
        elif not user.is_active:
            raise AuthorizationError("This account has been deactivated")
        elif identity.email_verified and not user.is_email_confirmed:
            user.confirm_email()
            user = await self.user_repository.update(user)

        token = await self.issue_session(user)
        return user, token, created

    # =========================================================================
    # SESSION TOKENS (AUTH GATE)
    # =========================================================================

    async def authenticate_token(self, token: str) -> User:
        """
        Resolve a bearer token to its user.

        Raises:
            AuthenticationError: For malformed, foreign, revoked or orphaned tokens
        """
        subject = self.security.verify_session_token(token)
        try:
            user_id = UUID(subject)
        except ValueError:
            raise AuthenticationError()

        user = await self.user_repository.get_by_token(user_id, token)
        if user is None or not user.is_active:
            raise AuthenticationError()
        return user

    async def logout(self, user: User, token: str) -> None:
        await self.user_repository.remove_token(user.user_id, token)
        logger.info(f"User logged out: {user.user_id}")

    async def logout_all(self, user: User) -> int:
        removed = await self.user_repository.remove_all_tokens(user.user_id)
        logger.info(f"User logged out of {removed} sessions: {user.user_id}")
        return removed

    # =========================================================================
    # EMAIL CONFIRMATION
    # =========================================================================

    async def send_confirmation_email(self, user: User) -> None:
        """Store a fresh confirmation token on the user and email it."""
        token = self.security.create_email_confirmation_token(str(user.user_id))
        user.email_confirm_token = token
        user.touch()
        await self.user_repository.update(user)
        await self.email_service.send_confirmation_email(user.email, token)

    async def request_verification_email(self, user: User) -> None:
        if user.is_email_confirmed:
            raise ValidationError("Email is already confirmed")
        await self.send_confirmation_email(user)

    async def confirm_email(self, token: str) -> User:
        """
        Mark the token owner's email as confirmed.

        Raises:
            ValidationError: For an invalid, expired or superseded token
            NotFoundError: If the user no longer exists
        """
        subject = self.security.verify_email_confirmation_token(token)
        if subject is None:
            raise ValidationError("Email failed to verify")

        user = await self.user_repository.get_by_id(UUID(subject))
        if user is None:
            raise NotFoundError("User", subject)
        if user.email_confirm_token != token:
            raise ValidationError("Email failed to verify")

        user.confirm_email()
        logger.info(f"Email confirmed for user: {user.user_id}")
        return await self.user_repository.update(user)

    # =========================================================================
    # PASSWORDS
    # =========================================================================

    async def request_password_reset(self, email: str) -> None:
        """
        Email a reset link if the address is registered.
        Unknown addresses are ignored so the endpoint does not reveal accounts.
        """
        user = await self.user_repository.get_by_email(email)
        if user is None:
            logger.info("Password reset requested for unknown email")
            return

        token = self.security.create_password_reset_token(str(user.user_id))
        user.password_reset_token = token
        user.touch()
        await self.user_repository.update(user)
        await self.email_service.send_password_reset_email(user.email, token)

    async def reset_password(self, token: str, new_password: str) -> User:
        validate_password_length(new_password, self.settings.PASSWORD_MIN_LENGTH)

        subject = self.security.verify_password_reset_token(token)
        user: Optional[User] = None
        if subject is not None:
            user = await self.user_repository.get_by_id(UUID(subject))
        if user is None or user.password_reset_token != token:
            raise ValidationError("Password reset link is invalid or has expired")

        user.password_hash = self.security.get_password_hash(new_password)
        user.password_reset_token = None
        user.touch()
        logger.info(f"Password reset for user: {user.user_id}")
        return await self.user_repository.update(user)

    async def change_password(self, user: User, current_password: str, new_password: str) -> User:
        if not self.security.verify_password(current_password, user.password_hash):
            raise ValidationError("Current password is incorrect", field="currentPassword")
        validate_password_length(new_password, self.settings.PASSWORD_MIN_LENGTH)

        user.password_hash = self.security.get_password_hash(new_password)
        user.touch()
        logger.info(f"Password changed for user: {user.user_id}")
        return await self.user_repository.update(user)
