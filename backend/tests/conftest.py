"""测试夹具

每个用例创建独立的应用和内存库，用例之间互不影响。
"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from dashboard.config import settings
from dashboard.database import Database
from dashboard.main import create_app
from dashboard.store import seed_defaults
from dashboard.utils.security import create_access_token

OWNER_OPEN_ID = "owner"


def auth_headers(open_id: str, **claims) -> dict:
    return {"Authorization": f"Bearer {create_access_token(open_id, **claims)}"}


@pytest.fixture
def app_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "DATABASE_URL", "sqlite+aiosqlite://")
    monkeypatch.setattr(settings, "DEMO_MODE", True)
    monkeypatch.setattr(settings, "OWNER_OPEN_ID", OWNER_OPEN_ID)
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setattr(settings, "STORAGE_API_URL", None)
    monkeypatch.setattr(settings, "LLM_API_KEY", None)
    monkeypatch.setattr(settings, "VOICE_API_URL", None)
    return settings


@pytest.fixture
def client(app_settings):
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    return auth_headers(OWNER_OPEN_ID, name="Owner")


@pytest.fixture
def alice_headers():
    return auth_headers("alice", name="Alice", email="alice@example.com")


@pytest.fixture
def bob_headers():
    return auth_headers("bob", name="Bob")


@pytest_asyncio.fixture
async def db():
    """直接操作存储层的会话"""
    database = Database("sqlite+aiosqlite://")
    await database.init()
    async with database.session() as session:
        await seed_defaults(session)
    async with database.session() as session:
        yield session
    await database.dispose()


@pytest.fixture
def create_post(client, admin_headers):
    """以管理员身份创建文章，返回 ID"""
    def _create(slug: str = "hello-world", **fields) -> int:
        payload = {"title": "Hello World", "slug": slug, "content": "first post", **fields}
        response = client.post("/api/blog/posts", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["id"]
    return _create


@pytest.fixture
def headers_for():
    """按 open_id 生成请求头"""
    return auth_headers
