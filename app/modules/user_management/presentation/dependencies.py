# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# The checkpoint every protected page goes through: it reads the sign-in token a person
# sends, works out who they are, and turns them away if they are not allowed in.
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies implementing the auth gate (bearer token -> stored session ->
# User) and the composable admin and email-confirmed gates.
# 🔗 Dependencies:
# FastAPI security (HTTPBearer), AuthService, app.shared.core.exceptions,
# app.shared.utils.logging (user binding)
# 🔄 Connected Modules / Calls From:
# Every authenticated endpoint in all modules

"""
Auth gate dependencies.

- get_auth_context: resolve the bearer token and keep it for logout
- get_current_user: the authenticated User (401 otherwise)
- get_optional_user: the User or None, for pages visible to guests
- require_admin / require_email_confirmed: 403 gates on top of authentication

Malformed, foreign, revoked and unknown tokens all fail with the same
401 "Please authenticate" body.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.services.auth_service import AuthService
from app.shared.core.exceptions import AuthenticationError, AuthorizationError
from app.shared.utils.logging import bind_user

# auto_error=False so a missing header renders our 401 body instead of FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class AuthContext:
    user: User
    token: str


async def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(),
) -> AuthContext:
    """
    Resolve the request's bearer token to its user.

    Raises:
        AuthenticationError: If the token is missing or not a live session
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    user = await auth_service.authenticate_token(credentials.credentials)
    bind_user(str(user.user_id))
    return AuthContext(user=user, token=credentials.credentials)


async def get_current_user(context: AuthContext = Depends(get_auth_context)) -> User:
    return context.user


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(),
) -> Optional[User]:
    """Authenticated user if a valid token was sent, otherwise None."""
    if credentials is None or not credentials.credentials:
        return None
    try:
        user = await auth_service.authenticate_token(credentials.credentials)
    except AuthenticationError:
        return None
    bind_user(str(user.user_id))
    return user


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise AuthorizationError("Admin privileges required", required_role="admin")
    return current_user


async def require_email_confirmed(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_email_confirmed:
        raise AuthorizationError(
            "Please confirm your email address first",
            error_code="EMAIL_NOT_CONFIRMED",
        )
    return current_user
