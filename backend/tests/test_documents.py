"""文档接口测试"""


def create_document(client, headers, **fields):
    payload = {"title": "Notes", "content": "some content", **fields}
    response = client.post("/api/documents", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


def test_create_and_get_document(client, alice_headers):
    document_id = create_document(client, alice_headers, tags="a,b")

    response = client.get(f"/api/documents/{document_id}", headers=alice_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Notes"
    assert data["format"] == "markdown"
    assert data["is_public"] is False
    assert data["tags"] == "a,b"


def test_list_only_returns_own_documents(client, alice_headers, bob_headers):
    create_document(client, alice_headers, title="alice doc")
    create_document(client, bob_headers, title="bob doc")

    response = client.get("/api/documents", headers=alice_headers)
    assert [d["title"] for d in response.json()] == ["alice doc"]


def test_update_merges_fields(client, alice_headers):
    document_id = create_document(client, alice_headers)

    response = client.patch(
        f"/api/documents/{document_id}", json={"content": "changed"}, headers=alice_headers
    )
    assert response.status_code == 200
    assert response.json() == {"affected": 1}

    data = client.get(f"/api/documents/{document_id}", headers=alice_headers).json()
    assert data["content"] == "changed"
    assert data["title"] == "Notes"


def test_other_user_is_forbidden_and_document_unchanged(client, alice_headers, bob_headers):
    document_id = create_document(client, alice_headers)

    response = client.get(f"/api/documents/{document_id}", headers=bob_headers)
    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"

    response = client.patch(
        f"/api/documents/{document_id}", json={"title": "hacked"}, headers=bob_headers
    )
    assert response.status_code == 403

    response = client.delete(f"/api/documents/{document_id}", headers=bob_headers)
    assert response.status_code == 403

    data = client.get(f"/api/documents/{document_id}", headers=alice_headers).json()
    assert data["title"] == "Notes"


def test_admin_can_access_any_document(client, alice_headers, admin_headers):
    document_id = create_document(client, alice_headers)

    assert client.get(f"/api/documents/{document_id}", headers=admin_headers).status_code == 200
    response = client.delete(f"/api/documents/{document_id}", headers=admin_headers)
    assert response.json() == {"affected": 1}
    assert client.get(f"/api/documents/{document_id}", headers=alice_headers).status_code == 404


def test_missing_document_returns_not_found(client, alice_headers):
    response = client.get("/api/documents/999", headers=alice_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"

    assert client.patch("/api/documents/999", json={"title": "x"}, headers=alice_headers).status_code == 404
    assert client.delete("/api/documents/999", headers=alice_headers).status_code == 404


def test_invalid_payload_is_bad_request(client, alice_headers):
    response = client.post("/api/documents", json={"title": "", "content": "x"}, headers=alice_headers)
    assert response.status_code == 400
    assert response.json()["code"] == "BAD_REQUEST"

    response = client.post(
        "/api/documents", json={"title": "t", "content": "x", "format": "pdf"}, headers=alice_headers
    )
    assert response.status_code == 400


def test_search_is_scoped_to_caller(client, alice_headers, bob_headers):
    create_document(client, alice_headers, title="Python tips")
    create_document(client, alice_headers, title="Cooking", content="no match")
    create_document(client, bob_headers, title="Python for bob")

    response = client.get("/api/documents/search", params={"query": "Python"}, headers=alice_headers)
    assert [d["title"] for d in response.json()] == ["Python tips"]

    response = client.get("/api/documents/search", params={"query": "python"}, headers=alice_headers)
    assert response.json() == []


def test_demo_user_is_used_without_token(client):
    document_id = create_document(client, {})
    data = client.get(f"/api/documents/{document_id}").json()
    assert data["author_id"] == 1


def test_unauthorized_without_demo_mode(client, app_settings, monkeypatch):
    monkeypatch.setattr(app_settings, "DEMO_MODE", False)

    response = client.get("/api/documents")
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_invalid_token_does_not_fall_back_to_demo_user(client):
    response = client.get("/api/documents", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
