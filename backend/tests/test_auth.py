"""身份解析测试"""


def test_me_returns_demo_user_without_token(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 200
    data = response.json()
    assert data["open_id"] == "demo_user"
    assert data["role"] == "user"


def test_me_is_null_without_demo_mode(client, app_settings, monkeypatch):
    monkeypatch.setattr(app_settings, "DEMO_MODE", False)
    response = client.get("/api/auth/me")
    assert response.status_code == 200
    assert response.json() is None


def test_token_upserts_user(client, headers_for):
    data = client.get("/api/auth/me", headers=headers_for("carol", name="Carol")).json()
    assert data["open_id"] == "carol"
    assert data["name"] == "Carol"
    assert data["role"] == "user"

    # 后续令牌只合并提供的字段
    again = client.get("/api/auth/me", headers=headers_for("carol", email="carol@example.com")).json()
    assert again["id"] == data["id"]
    assert again["name"] == "Carol"
    assert again["email"] == "carol@example.com"


def test_owner_becomes_admin(client, admin_headers):
    assert client.get("/api/auth/me", headers=admin_headers).json()["role"] == "admin"


def test_invalid_token_resolves_to_null(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 200
    assert response.json() is None


def test_system_endpoints(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/").json()["docs"] == "/api/docs"


def test_unknown_route_has_error_code(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"
