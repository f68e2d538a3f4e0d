"""
Global pytest configuration and fixtures for all tests.

Provides:
- Environment for a throwaway in-memory SQLite database
- Fake email and storage services
- An httpx client bound to the ASGI app
- Helpers for signing users up and creating groups over HTTP
"""

import os

os.environ.update({
    "ENVIRONMENT": "test",
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "DB_CREATE_TABLES": "true",
    "JWT_SECRET_KEY": "test-session-secret-key-0123456789abcdef",
    "EMAIL_CONFIRM_SECRET_KEY": "test-email-confirm-secret-0123456789abcdef",
    "BCRYPT_ROUNDS": "4",
    "RATE_LIMIT_ENABLED": "false",
    "LOG_FORMAT": "text",
    "LOG_LEVEL": "WARNING",
})

from typing import Any, AsyncGenerator, Dict, List, Optional  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import update  # noqa: E402

from app.shared.config.settings import get_settings  # noqa: E402

get_settings.cache_clear()

from app.main import app as fastapi_app  # noqa: E402
from app.modules.user_management.infrastructure.database.models import UserModel  # noqa: E402
from app.shared.core.value_objects import ImageProvider, ImageRef  # noqa: E402
from app.shared.infrastructure.database.connection import close_database, init_database  # noqa: E402
from app.shared.infrastructure.database.session import session_manager  # noqa: E402
from app.shared.infrastructure.email.email_service import get_email_service  # noqa: E402
from app.shared.infrastructure.storage.supabase_storage import get_storage_client  # noqa: E402


class FakeEmailService:
    """Records outgoing mail instead of talking to SMTP."""

    def __init__(self):
        self.confirmations: List[Dict[str, str]] = []
        self.resets: List[Dict[str, str]] = []

    async def send_confirmation_email(self, to: str, token: str) -> bool:
        self.confirmations.append({"to": to, "token": token})
        return True

    async def send_password_reset_email(self, to: str, token: str) -> bool:
        self.resets.append({"to": to, "token": token})
        return True

    def last_confirmation_token(self, to: str) -> str:
        return [m["token"] for m in self.confirmations if m["to"] == to][-1]

    def last_reset_token(self, to: str) -> str:
        return [m["token"] for m in self.resets if m["to"] == to][-1]


class FakeStorageClient:
    """In-memory object store standing in for Supabase."""

    def __init__(self):
        self.objects: Dict[str, str] = {}
        self.deleted: List[str] = []

    async def upload_image(self, base64_data: str, file_name: str, folder: str) -> ImageRef:
        key = f"{folder}/{len(self.objects) + 1}-{file_name}"
        self.objects[key] = base64_data
        return ImageRef(provider=ImageProvider.SUPABASE, key=key, url=f"https://cdn.test/{key}")

    async def delete_file(self, key: str) -> bool:
        self.deleted.append(key)
        return self.objects.pop(key, None) is not None

    async def replace_image(
        self,
        previous: Optional[ImageRef],
        base64_data: str,
        file_name: str,
        folder: str,
    ) -> ImageRef:
        new_ref = await self.upload_image(base64_data, file_name, folder)
        if previous and previous.provider == ImageProvider.SUPABASE and previous.key:
            await self.delete_file(previous.key)
        return new_ref


@pytest.fixture
def fake_email() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def fake_storage() -> FakeStorageClient:
    return FakeStorageClient()


@pytest.fixture
async def api_app(fake_email, fake_storage):
    """The application wired to a fresh in-memory database."""
    await init_database(get_settings())
    session_manager.initialize()

    bindings = dict(fastapi_app.dependency_overrides)
    fastapi_app.dependency_overrides[get_email_service] = lambda: fake_email
    fastapi_app.dependency_overrides[get_storage_client] = lambda: fake_storage

    yield fastapi_app

    fastapi_app.dependency_overrides = bindings
    session_manager.reset()
    await close_database()


@pytest.fixture
async def client(api_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=api_app), base_url="http://test") as ac:
        yield ac


# =========================================================================
# HTTP HELPERS
# =========================================================================

def auth_header(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class Account:
    """A signed-up user as seen by the tests."""

    def __init__(self, body: Dict[str, Any], password: str):
        self.user = body["user"]
        self.token = body["token"]
        self.password = password

    @property
    def id(self) -> str:
        return self.user["id"]

    @property
    def email(self) -> str:
        return self.user["email"]

    @property
    def headers(self) -> Dict[str, str]:
        return auth_header(self.token)


@pytest.fixture
def signup(client):
    """Factory creating accounts over HTTP."""
    counter = {"n": 0}

    async def _signup(full_name: Optional[str] = None, password: str = "correct-horse-1") -> Account:
        counter["n"] += 1
        name = full_name or f"Member {counter['n']}"
        response = await client.post("/signup", json={
            "fullName": name,
            "email": f"user{counter['n']}@example.com",
            "password": password,
        })
        assert response.status_code == 201, response.text
        return Account(response.json(), password)

    return _signup


@pytest.fixture
def confirm_email(client, fake_email):
    async def _confirm(account: Account) -> None:
        token = fake_email.last_confirmation_token(account.email)
        response = await client.get(f"/confirm-email/{token}")
        assert response.status_code == 200, response.text

    return _confirm


@pytest.fixture
def make_admin(api_app):
    async def _make_admin(account: Account) -> None:
        async with session_manager.get_session() as session:
            await session.execute(
                update(UserModel).where(UserModel.email == account.email).values(is_admin=True)
            )

    return _make_admin


@pytest.fixture
def create_group(client):
    counter = {"n": 0}

    async def _create_group(owner: Account, **fields: Any) -> Dict[str, Any]:
        counter["n"] += 1
        payload = {"title": f"Hiking Club {counter['n']}"}
        payload.update(fields)
        response = await client.post("/group", json=payload, headers=owner.headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create_group


@pytest.fixture
def join_group(client):
    async def _join(account: Account, group: Dict[str, Any]) -> Dict[str, Any]:
        response = await client.post(f"/group/{group['id']}/join", headers=account.headers)
        assert response.status_code == 200, response.text
        return response.json()

    return _join
