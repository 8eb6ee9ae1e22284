"""存储层测试"""
from datetime import datetime

from dashboard.store import blog, comments, documents, files, finance, likes, users, categories


async def test_seed_data(db):
    demo = await users.get_user_by_open_id(db, "demo_user")
    assert demo is not None
    assert demo.id == 1
    assert demo.role == "user"

    seeded = await categories.get_all_categories(db)
    assert [(c.id, c.slug) for c in seeded] == [(1, "tech"), (2, "life")]


async def test_ids_increase_after_delete(db):
    first = await documents.create_document(db, title="a", content="", author_id=1)
    second = await documents.create_document(db, title="b", content="", author_id=1)
    assert await documents.delete_document(db, second) == 1

    third = await documents.create_document(db, title="c", content="", author_id=1)
    assert first < second < third


async def test_create_document_defaults(db):
    document_id = await documents.create_document(db, title="t", content="c", author_id=1)
    document = await documents.get_document_by_id(db, document_id)
    assert document.format == "markdown"
    assert document.is_public is False
    assert document.category_id is None


async def test_update_missing_document_returns_zero(db):
    assert await documents.update_document(db, 999, {"title": "x"}) == 0
    assert await documents.delete_document(db, 999) == 0


async def test_update_document_refreshes_updated_at(db):
    document_id = await documents.create_document(db, title="t", content="c", author_id=1)
    document = await documents.get_document_by_id(db, document_id)
    before = document.updated_at

    assert await documents.update_document(db, document_id, {"content": "new"}) == 1
    assert document.content == "new"
    assert document.updated_at >= before
    assert document.title == "t"


async def test_search_is_case_sensitive_and_scoped(db):
    await documents.create_document(db, title="Hello", content="", author_id=1)
    await documents.create_document(db, title="other", content="say hello", author_id=1)
    await documents.create_document(db, title="Hello again", content="", author_id=2)

    assert [d.title for d in await documents.search_documents(db, "Hello", author_id=1)] == ["Hello"]
    assert [d.title for d in await documents.search_documents(db, "hello", author_id=1)] == ["other"]
    assert len(await documents.search_documents(db, "Hello")) == 2


async def test_delete_document_keeps_files(db):
    document_id = await documents.create_document(db, title="t", content="c", author_id=1)
    file_id = await files.create_file(
        db, filename="a.txt", file_key="1/files/x-a.txt", url="http://x/a.txt",
        uploader_id=1, document_id=document_id,
    )

    assert await documents.delete_document(db, document_id) == 1

    file = await files.get_file_by_id(db, file_id)
    assert file is not None
    assert file.document_id == document_id
    assert await documents.get_document_by_id(db, document_id) is None


async def test_blog_listing_order_and_filter(db):
    draft = await blog.create_blog_post(db, title="draft", slug="draft", content="", author_id=1)
    older = await blog.create_blog_post(
        db, title="older", slug="older", content="", author_id=1,
        is_published=True, published_at=datetime(2024, 1, 1),
    )
    newer = await blog.create_blog_post(
        db, title="newer", slug="newer", content="", author_id=1,
        is_published=True, published_at=datetime(2024, 6, 1),
    )

    published = await blog.get_all_blog_posts(db)
    assert [p.id for p in published] == [newer, older]

    everything = await blog.get_all_blog_posts(db, include_unpublished=True)
    # 草稿按创建时间（当前时间）排在最前
    assert [p.id for p in everything] == [draft, newer, older]


async def test_increment_views_does_not_touch_updated_at(db):
    post_id = await blog.create_blog_post(db, title="t", slug="t", content="", author_id=1)
    post = await blog.get_blog_post_by_id(db, post_id)
    updated_at = post.updated_at

    for _ in range(3):
        assert await blog.increment_blog_post_views(db, post_id) == 1

    assert post.view_count == 3
    assert post.updated_at == updated_at
    assert await blog.increment_blog_post_views(db, 999) == 0


async def test_delete_post_removes_comments_and_likes(db):
    post_id = await blog.create_blog_post(db, title="t", slug="t", content="", author_id=1)
    await comments.create_comment(db, content="hi", post_id=post_id, author_id=1)
    await likes.create_like(db, post_id=post_id, user_id=1)

    assert await blog.delete_blog_post(db, post_id) == 1
    assert await comments.get_comments_by_post(db, post_id) == []
    assert await likes.get_likes_by_post(db, post_id) == []


async def test_delete_like_by_pair(db):
    await likes.create_like(db, post_id=1, user_id=1)
    assert await likes.get_user_like_for_post(db, 1, 1) is not None
    assert await likes.delete_like(db, 1, 1) == 1
    assert await likes.delete_like(db, 1, 1) == 0
    assert await likes.get_likes_by_post(db, 1) == []


async def test_latest_balance_uses_max_date(db):
    later = await finance.create_balance(db, user_id=1, amount=500, date=datetime(2024, 3, 1))
    await finance.create_balance(db, user_id=1, amount=100, date=datetime(2024, 1, 1))

    latest = await finance.get_latest_balance(db, 1)
    assert latest.id == later
    assert latest.amount == 500
    assert latest.currency == "CNY"


async def test_latest_balance_tie_prefers_highest_id(db):
    await finance.create_balance(db, user_id=1, amount=100, date=datetime(2024, 3, 1))
    second = await finance.create_balance(db, user_id=1, amount=200, date=datetime(2024, 3, 1))

    assert (await finance.get_latest_balance(db, 1)).id == second
    assert await finance.get_latest_balance(db, 2) is None


async def test_transactions_summary_range(db):
    samples = [
        ("income", 10000, datetime(2024, 1, 5)),
        ("income", 2550, datetime(2024, 1, 31)),
        ("expense", 3000, datetime(2024, 1, 10)),
        ("expense", 999, datetime(2024, 1, 1)),
        ("income", 70000, datetime(2024, 2, 1)),  # 区间外
        ("expense", 500, datetime(2023, 12, 31)),  # 区间外
    ]
    for type_, amount, date in samples:
        await finance.create_transaction(db, user_id=1, type=type_, category="misc", amount=amount, date=date)
    await finance.create_transaction(
        db, user_id=2, type="income", category="misc", amount=1, date=datetime(2024, 1, 5)
    )

    summary = await finance.get_transactions_summary(db, 1, datetime(2024, 1, 1), datetime(2024, 1, 31))
    assert summary == {"total_income": 12550, "total_expense": 3999, "balance": 8551}


async def test_transactions_summary_empty(db):
    summary = await finance.get_transactions_summary(db, 1, datetime(2024, 1, 1), datetime(2024, 1, 31))
    assert summary == {"total_income": 0, "total_expense": 0, "balance": 0}


async def test_upsert_user_merges(db):
    user = await users.upsert_user(db, open_id="alice", name="Alice")
    assert user.role == "user"

    same = await users.upsert_user(db, open_id="alice", email="alice@example.com")
    assert same.id == user.id
    assert same.name == "Alice"
    assert same.email == "alice@example.com"
