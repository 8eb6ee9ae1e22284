"""评论、点赞与通知测试"""


def notifications_of(client, headers, **params):
    response = client.get("/api/notifications", params=params, headers=headers)
    assert response.status_code == 200
    return response.json()


def test_comment_notifies_post_author(client, create_post, alice_headers, admin_headers):
    post_id = create_post(title="My Post", is_published=True)

    response = client.post("/api/comments", json={"post_id": post_id, "content": "nice"}, headers=alice_headers)
    assert response.status_code == 201

    notifications = notifications_of(client, admin_headers)
    assert len(notifications) == 1
    assert notifications[0]["type"] == "comment"
    assert notifications[0]["title"] == "New comment on your post"
    assert notifications[0]["content"] == 'Alice commented on "My Post"'
    assert notifications[0]["related_id"] == post_id
    assert notifications[0]["is_read"] is False


def test_author_actions_do_not_notify(client, create_post, admin_headers):
    post_id = create_post(is_published=True)

    client.post("/api/comments", json={"post_id": post_id, "content": "self"}, headers=admin_headers)
    client.post("/api/likes/toggle", json={"post_id": post_id}, headers=admin_headers)

    assert notifications_of(client, admin_headers) == []


def test_comment_on_missing_post(client, alice_headers):
    response = client.post("/api/comments", json={"post_id": 999, "content": "hi"}, headers=alice_headers)
    assert response.status_code == 404


def test_reply_must_belong_to_same_post(client, create_post, alice_headers):
    first = create_post(slug="first")
    second = create_post(slug="second")
    parent = client.post("/api/comments", json={"post_id": first, "content": "a"}, headers=alice_headers).json()["id"]

    response = client.post(
        "/api/comments", json={"post_id": first, "content": "b", "parent_id": parent}, headers=alice_headers
    )
    assert response.status_code == 201

    response = client.post(
        "/api/comments", json={"post_id": second, "content": "c", "parent_id": parent}, headers=alice_headers
    )
    assert response.status_code == 404


def test_list_comments_in_order(client, create_post, alice_headers, bob_headers):
    post_id = create_post()
    client.post("/api/comments", json={"post_id": post_id, "content": "first"}, headers=alice_headers)
    client.post("/api/comments", json={"post_id": post_id, "content": "second"}, headers=bob_headers)

    comments = client.get("/api/comments", params={"post_id": post_id}).json()
    assert [c["content"] for c in comments] == ["first", "second"]


def test_any_user_can_delete_a_comment(client, create_post, alice_headers, bob_headers):
    post_id = create_post()
    comment_id = client.post(
        "/api/comments", json={"post_id": post_id, "content": "mine"}, headers=alice_headers
    ).json()["id"]

    response = client.delete(f"/api/comments/{comment_id}", headers=bob_headers)
    assert response.json() == {"affected": 1}
    assert client.get("/api/comments", params={"post_id": post_id}).json() == []
    assert client.delete(f"/api/comments/{comment_id}", headers=bob_headers).status_code == 404


def test_toggle_like_twice(client, create_post, alice_headers, admin_headers):
    post_id = create_post(title="Liked", is_published=True)

    response = client.post("/api/likes/toggle", json={"post_id": post_id}, headers=alice_headers)
    assert response.json() == {"liked": True}
    likes = client.get("/api/likes", params={"post_id": post_id}).json()
    assert likes["count"] == 1

    response = client.post("/api/likes/toggle", json={"post_id": post_id}, headers=alice_headers)
    assert response.json() == {"liked": False}
    likes = client.get("/api/likes", params={"post_id": post_id}).json()
    assert likes == {"count": 0, "likes": []}

    # 只有点赞产生通知，取消点赞不产生
    notifications = notifications_of(client, admin_headers)
    assert [n["type"] for n in notifications] == ["like"]
    assert notifications[0]["content"] == 'Alice liked "Liked"'


def test_like_missing_post(client, alice_headers):
    response = client.post("/api/likes/toggle", json={"post_id": 999}, headers=alice_headers)
    assert response.status_code == 404


def test_like_counts_each_user_once(client, create_post, alice_headers, bob_headers):
    post_id = create_post()
    client.post("/api/likes/toggle", json={"post_id": post_id}, headers=alice_headers)
    client.post("/api/likes/toggle", json={"post_id": post_id}, headers=bob_headers)

    assert client.get("/api/likes", params={"post_id": post_id}).json()["count"] == 2


def test_anonymous_actor_name(client, create_post, headers_for, admin_headers):
    post_id = create_post(title="Quiet")
    client.post("/api/likes/toggle", json={"post_id": post_id}, headers=headers_for("nameless"))

    assert notifications_of(client, admin_headers)[0]["content"] == 'Someone liked "Quiet"'


def test_mark_as_read(client, create_post, alice_headers, admin_headers):
    post_id = create_post()
    client.post("/api/comments", json={"post_id": post_id, "content": "one"}, headers=alice_headers)
    client.post("/api/comments", json={"post_id": post_id, "content": "two"}, headers=alice_headers)

    notification_id = notifications_of(client, admin_headers)[0]["id"]
    response = client.post(f"/api/notifications/{notification_id}/read", headers=admin_headers)
    assert response.json() == {"affected": 1}

    unread = notifications_of(client, admin_headers, unread_only=True)
    assert len(unread) == 1
    assert unread[0]["id"] != notification_id

    assert client.post("/api/notifications/999/read", headers=admin_headers).status_code == 404


def test_mark_as_read_does_not_check_recipient(client, create_post, alice_headers, bob_headers, admin_headers):
    post_id = create_post()
    client.post("/api/comments", json={"post_id": post_id, "content": "hi"}, headers=alice_headers)
    notification_id = notifications_of(client, admin_headers)[0]["id"]

    response = client.post(f"/api/notifications/{notification_id}/read", headers=bob_headers)
    assert response.json() == {"affected": 1}
    assert notifications_of(client, admin_headers, unread_only=True) == []


def test_mark_all_as_read_is_scoped_to_caller(
    client, app_settings, monkeypatch, create_post, admin_headers, alice_headers, bob_headers
):
    owner_post = create_post(slug="owner-post")
    # alice 首次出现时成为管理员，可以发表自己的文章
    monkeypatch.setattr(app_settings, "OWNER_OPEN_ID", "alice")
    alice_post = client.post(
        "/api/blog/posts", json={"title": "A", "slug": "alice-post", "content": "c"}, headers=alice_headers
    ).json()["id"]

    client.post("/api/comments", json={"post_id": owner_post, "content": "x"}, headers=bob_headers)
    client.post("/api/comments", json={"post_id": alice_post, "content": "y"}, headers=bob_headers)

    response = client.post("/api/notifications/read-all", headers=admin_headers)
    assert response.json() == {"affected": 1}
    assert client.post("/api/notifications/read-all", headers=admin_headers).json() == {"affected": 0}

    unread = notifications_of(client, alice_headers, unread_only=True)
    assert [n["related_id"] for n in unread] == [alice_post]
