# 📄 File: app/modules/user_management/infrastructure/external/oauth_providers.py
# 🧭 Purpose (Layman Explanation):
# Lets people sign in to Clubbera with their Google account: we swap the one-time code
# Google gives the browser for the person's name, email and picture.
#
# 🧪 Purpose (Technical Summary):
# Google OAuth 2.0 authorization-code exchange and userinfo retrieval over httpx,
# normalized into an OAuthIdentity the auth service can log in or register.
#
# 🔗 Dependencies:
# - httpx: Async HTTP client
# - app.shared.config.settings: OAuth client credentials
#
# 🔄 Connected Modules / Calls From:
# - auth_service.py (google_authenticate)
# - POST /google-auth endpoint

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional

import httpx

from app.shared.config.settings import Settings, get_settings
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class OAuthIdentity:
    """Normalized identity returned by a provider."""
    provider: str
    provider_id: str
    email: str
    email_verified: bool
    full_name: str
    picture: Optional[str] = None


class OAuthProvider(ABC):
    """Abstract base class for OAuth providers."""

    @abstractmethod
    async def exchange_code_for_token(self, code: str) -> Optional[Dict]:
        pass

    @abstractmethod
    async def get_user_info(self, access_token: str) -> Optional[Dict]:
        pass

    @abstractmethod
    def normalize_user_data(self, provider_data: Dict) -> Optional[OAuthIdentity]:
        pass

    async def authenticate(self, code: str) -> Optional[OAuthIdentity]:
        """Run the full code -> token -> profile exchange. None on any failure."""
        token_data = await self.exchange_code_for_token(code)
        if not token_data or "access_token" not in token_data:
            return None
        user_info = await self.get_user_info(token_data["access_token"])
        if not user_info:
            return None
        return self.normalize_user_data(user_info)


class GoogleOAuthProvider(OAuthProvider):
    """
    Google OAuth 2.0 provider implementation.
    """

    token_url = "https://oauth2.googleapis.com/token"
    user_info_url = "https://www.googleapis.com/oauth2/v2/userinfo"

    def __init__(self, settings: Settings, timeout: float = 10.0):
        self.client_id = settings.GOOGLE_CLIENT_ID
        self.client_secret = settings.GOOGLE_CLIENT_SECRET
        self.redirect_uri = settings.GOOGLE_REDIRECT_URI
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    async def exchange_code_for_token(self, code: str) -> Optional[Dict]:
        """
        Exchange authorization code for Google access token.

        Returns:
            Optional[Dict]: Token data if successful, None otherwise
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": self.redirect_uri,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.token_url, data=data)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logger.error(f"HTTP error during Google token exchange: {e}")
            return None

    async def get_user_info(self, access_token: str) -> Optional[Dict]:
        headers = {"Authorization": f"Bearer {access_token}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.user_info_url, headers=headers)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logger.error(f"HTTP error during Google user info retrieval: {e}")
            return None

    def normalize_user_data(self, provider_data: Dict) -> Optional[OAuthIdentity]:
        """
        Normalize Google user data. Accounts without an email are rejected.
        """
        email = provider_data.get("email")
        if not email:
            return None
        return OAuthIdentity(
            provider="google",
            provider_id=str(provider_data.get("id", "")),
            email=email.lower(),
            email_verified=bool(provider_data.get("verified_email", False)),
            full_name=provider_data.get("name") or email.split("@")[0],
            picture=provider_data.get("picture"),
        )


@lru_cache()
def get_google_oauth_provider() -> GoogleOAuthProvider:
    return GoogleOAuthProvider(get_settings())
