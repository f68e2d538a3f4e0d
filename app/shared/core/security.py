"""
Security utilities for session tokens, one-time email tokens and password hashing.

Session tokens carry the user id and a random token id and never expire on
their own; they stay valid for as long as they are stored against the user.
Email-confirmation and password-reset tokens are short-lived JWTs.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from ..config.settings import Settings, get_settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)

SESSION_TOKEN = "session"
EMAIL_CONFIRM_TOKEN = "email_confirm"
PASSWORD_RESET_TOKEN = "password_reset"


class SecurityManager:
    """
    Centralized security manager for authentication tokens and passwords.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.algorithm = settings.JWT_ALGORITHM
        self.secret_key = settings.JWT_SECRET_KEY
        self.email_secret_key = settings.EMAIL_CONFIRM_SECRET_KEY
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.BCRYPT_ROUNDS,
        )

    # =========================================================================
    # SESSION TOKENS
    # =========================================================================

    def create_session_token(self, user_id: str) -> str:
        """
        Create a session token for a user.

        Args:
            user_id: User UUID as string

        Returns:
            str: Encoded JWT; only valid while stored in the user's token list
        """
        payload = {
            "sub": str(user_id),
            "jti": uuid.uuid4().hex,
            "iat": datetime.now(timezone.utc),
            "type": SESSION_TOKEN,
        }
        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Session token created for user: {user_id}")
        return token

    def verify_session_token(self, token: str) -> str:
        """
        Verify a session token's signature and shape.

        Returns:
            str: The user id in the token subject

        Raises:
            AuthenticationError: For any malformed or foreign token
        """
        payload = self._decode(token, self.secret_key, SESSION_TOKEN)
        if payload is None:
            raise AuthenticationError()
        return payload["sub"]

    # =========================================================================
    # ONE-TIME EMAIL TOKENS
    # =========================================================================

    def create_email_confirmation_token(self, user_id: str) -> str:
        return self._create_expiring_token(
            user_id,
            self.email_secret_key,
            EMAIL_CONFIRM_TOKEN,
            timedelta(minutes=self.settings.EMAIL_TOKEN_EXPIRE_MINUTES),
        )

    def verify_email_confirmation_token(self, token: str) -> Optional[str]:
        payload = self._decode(token, self.email_secret_key, EMAIL_CONFIRM_TOKEN)
        return payload["sub"] if payload else None

    def create_password_reset_token(self, user_id: str) -> str:
        return self._create_expiring_token(
            user_id,
            self.secret_key,
            PASSWORD_RESET_TOKEN,
            timedelta(minutes=self.settings.PASSWORD_RESET_EXPIRE_MINUTES),
        )

    def verify_password_reset_token(self, token: str) -> Optional[str]:
        payload = self._decode(token, self.secret_key, PASSWORD_RESET_TOKEN)
        return payload["sub"] if payload else None

    def _create_expiring_token(
        self,
        user_id: str,
        secret: str,
        token_type: str,
        lifetime: timedelta
    ) -> str:
        now = datetime.now(timezone.utc)
        # jti keeps a re-issued token distinct from the one it supersedes
        payload = {
            "sub": str(user_id),
            "jti": uuid.uuid4().hex,
            "iat": now,
            "exp": now + lifetime,
            "type": token_type,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def _decode(self, token: str, secret: str, token_type: str) -> Optional[Dict[str, Any]]:
        """Decode a token, returning None for bad signature, expiry or wrong type."""
        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"JWT validation failed: {e}")
            return None

        if payload.get("type") != token_type or not payload.get("sub"):
            logger.debug(f"Token type mismatch. Expected: {token_type}")
            return None
        return payload

    # =========================================================================
    # PASSWORDS
    # =========================================================================

    def get_password_hash(self, password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            str: Hashed password
        """
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify password against hash.

        Users created through OAuth have no password hash and never match.
        """
        if not hashed_password:
            return False
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except ValueError as e:
            logger.error(f"Password verification error: {e}")
            return False


@lru_cache()
def get_security_manager() -> SecurityManager:
    """Get the process-wide security manager."""
    return SecurityManager(get_settings())
