# 📄 File: app/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# The web addresses people use to sign up, log in and out, confirm their email, reset a
# forgotten password and sign in with Google.
#
# 🧪 Purpose (Technical Summary):
# FastAPI authentication endpoints delegating to AuthService, rate limited with slowapi.
#
# 🔗 Dependencies:
# - FastAPI router, slowapi limiter (app.api.middleware.rate_limiting)
# - AuthService, auth gate dependencies, auth schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted at / and /api/v1)
# - Frontend applications

import logging

from fastapi import APIRouter, Depends, Request, status

from app.api.middleware.rate_limiting import AUTH_RATE_LIMIT, limiter
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.services.auth_service import AuthService
from app.modules.user_management.presentation.api.schemas.auth_schemas import (
    AuthResponse,
    ChangePasswordRequest,
    GoogleAuthRequest,
    LoginRequest,
    LogoutAllResponse,
    PasswordResetRequest,
    ResetPasswordRequest,
    SignupRequest,
)
from app.modules.user_management.presentation.api.schemas.user_schemas import UserResponse
from app.modules.user_management.presentation.dependencies import (
    AuthContext,
    get_auth_context,
    get_current_user,
)
from app.shared.core.schemas import MessageResponse

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["Authentication"])


@auth_router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={400: {"description": "Invalid data"}, 409: {"description": "Email taken"}},
)
@limiter.limit(AUTH_RATE_LIMIT)
async def signup(
    request: Request,
    payload: SignupRequest,
    auth_service: AuthService = Depends(),
) -> AuthResponse:
    """
    Register a new account, send the confirmation email and sign the user in.
    """
    user, token = await auth_service.register(
        full_name=payload.full_name,
        email=payload.email,
        password=payload.password,
        gender=payload.gender,
    )
    return AuthResponse(user=UserResponse.from_domain(user), token=token)


@auth_router.post("/login", response_model=AuthResponse, summary="Log in with email and password")
@limiter.limit(AUTH_RATE_LIMIT)
async def login(
    request: Request,
    payload: LoginRequest,
    auth_service: AuthService = Depends(),
) -> AuthResponse:
    user, token = await auth_service.login(payload.email, payload.password)
    return AuthResponse(user=UserResponse.from_domain(user), token=token)


@auth_router.post("/google-auth", response_model=AuthResponse, summary="Sign in with Google")
@limiter.limit(AUTH_RATE_LIMIT)
async def google_auth(
    request: Request,
    payload: GoogleAuthRequest,
    auth_service: AuthService = Depends(),
) -> AuthResponse:
    user, token, _ = await auth_service.google_authenticate(payload.code)
    return AuthResponse(user=UserResponse.from_domain(user), token=token)


@auth_router.post("/logout", response_model=MessageResponse, summary="Revoke the current session")
async def logout(
    context: AuthContext = Depends(get_auth_context),
    auth_service: AuthService = Depends(),
) -> MessageResponse:
    await auth_service.logout(context.user, context.token)
    return MessageResponse(message="Logged out")


@auth_router.post("/logout-all", response_model=LogoutAllResponse, summary="Revoke every session")
async def logout_all(
    current_user: User = Depends(get_current_user),
    auth_service: AuthService = Depends(),
) -> LogoutAllResponse:
    revoked = await auth_service.logout_all(current_user)
    return LogoutAllResponse(message="Logged out of all sessions", sessions_revoked=revoked)


# =========================================================================
# EMAIL CONFIRMATION
# =========================================================================

@auth_router.get("/confirm-email/{token}", response_model=MessageResponse)
async def confirm_email(token: str, auth_service: AuthService = Depends()) -> MessageResponse:
    await auth_service.confirm_email(token)
    return MessageResponse(message="Email confirmed")


@auth_router.post("/request-verification-email", response_model=MessageResponse)
@limiter.limit(AUTH_RATE_LIMIT)
async def request_verification_email(
    request: Request,
    current_user: User = Depends(get_current_user),
    auth_service: AuthService = Depends(),
) -> MessageResponse:
    await auth_service.request_verification_email(current_user)
    return MessageResponse(message="Confirmation email sent")


# =========================================================================
# PASSWORDS
# =========================================================================

@auth_router.post("/password-reset", response_model=MessageResponse)
@limiter.limit(AUTH_RATE_LIMIT)
async def password_reset(
    request: Request,
    payload: PasswordResetRequest,
    auth_service: AuthService = Depends(),
) -> MessageResponse:
    """Always answers the same way whether or not the email is registered."""
    await auth_service.request_password_reset(payload.email)
    return MessageResponse(message="If that email is registered, a reset link has been sent")


@auth_router.post("/reset-password/{token}", response_model=MessageResponse)
@limiter.limit(AUTH_RATE_LIMIT)
async def reset_password(
    request: Request,
    token: str,
    payload: ResetPasswordRequest,
    auth_service: AuthService = Depends(),
) -> MessageResponse:
    await auth_service.reset_password(token, payload.password)
    return MessageResponse(message="Password has been reset")


@auth_router.patch("/me/change-password", response_model=MessageResponse)
async def change_password(
    payload: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    auth_service: AuthService = Depends(),
) -> MessageResponse:
    await auth_service.change_password(current_user, payload.current_password, payload.new_password)
    return MessageResponse(message="Password changed")
