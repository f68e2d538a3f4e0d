# 📄 File: app/modules/user_management/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Connections to outside sign-in providers such as Google.
# 🧪 Purpose (Technical Summary):
# OAuth provider integrations.
# 🔗 Dependencies:
# httpx
# 🔄 Connected Modules / Calls From:
# auth_service.py

from .oauth_providers import GoogleOAuthProvider, OAuthIdentity, get_google_oauth_provider

__all__ = ["GoogleOAuthProvider", "OAuthIdentity", "get_google_oauth_provider"]
