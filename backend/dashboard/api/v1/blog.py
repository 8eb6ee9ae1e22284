"""博客路由"""
from datetime import datetime
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ...database import get_db
from ...errors import BadRequestError, NotFoundError
from ...models import User, BlogPost
from ...schemas import (
    BlogPostCreate, BlogPostUpdate, BlogPostResponse,
    IdResponse, AffectedResponse,
)
from ...store import blog as blog_store
from ..deps import get_current_user, get_admin_user

router = APIRouter()


async def get_existing_post(db: AsyncSession, post_id: int) -> BlogPost:
    post = await blog_store.get_blog_post_by_id(db, post_id)
    if not post:
        raise NotFoundError("文章不存在")
    return post


def apply_publish_transition(post: BlogPost, is_published, updates: dict) -> dict:
    """发布状态变化写入 updates

    只有与当前状态不同时才写入；首次发布时记录 published_at，
    取消发布保留原有的 published_at。
    """
    if is_published is not None and is_published != post.is_published:
        updates["is_published"] = is_published
        if is_published and post.published_at is None:
            updates["published_at"] = datetime.utcnow()
    return updates


# ==================== 公开接口 ====================

@router.get("/posts", response_model=List[BlogPostResponse], name="blog.listPublished")
async def list_published_posts(db: AsyncSession = Depends(get_db)):
    """已发布文章"""
    return await blog_store.get_all_blog_posts(db, include_unpublished=False)


@router.get("/posts/all", response_model=List[BlogPostResponse], name="blog.listAll")
async def list_all_posts(
    current_user: User = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db)
):
    """全部文章，包括草稿（管理员）"""
    return await blog_store.get_all_blog_posts(db, include_unpublished=True)


@router.get("/posts/slug/{slug}", response_model=BlogPostResponse, name="blog.getBySlug")
async def get_post_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    """按 slug 读取文章，每次读取浏览数 +1"""
    post = await blog_store.get_blog_post_by_slug(db, slug)
    if not post:
        raise NotFoundError("文章不存在")
    await blog_store.increment_blog_post_views(db, post.id)
    return post


@router.get("/categories/{category_id}/posts", response_model=List[BlogPostResponse], name="blog.getByCategory")
async def list_posts_by_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """分类下的已发布文章"""
    return await blog_store.get_blog_posts_by_category(db, category_id)


@router.get("/search", response_model=List[BlogPostResponse], name="blog.search")
async def search_posts(query: str = Query(...), db: AsyncSession = Depends(get_db)):
    """搜索已发布文章"""
    return await blog_store.search_blog_posts(db, query)


# ==================== 需要登录 ====================

@router.get("/posts/{post_id}", response_model=BlogPostResponse, name="blog.getById")
async def get_post(
    post_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """按 ID 读取文章（不计浏览数）"""
    return await get_existing_post(db, post_id)


# ==================== 管理员 ====================

@router.post("/posts", response_model=IdResponse, status_code=status.HTTP_201_CREATED, name="blog.create")
async def create_post(
    post_in: BlogPostCreate,
    current_user: User = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db)
):
    """创建文章"""
    if await blog_store.get_blog_post_by_slug(db, post_in.slug):
        raise BadRequestError("文章 slug 已存在")

    post_id = await blog_store.create_blog_post(
        db,
        author_id=current_user.id,
        published_at=datetime.utcnow() if post_in.is_published else None,
        **post_in.model_dump(),
    )
    return IdResponse(id=post_id)


@router.patch("/posts/{post_id}", response_model=AffectedResponse, name="blog.update")
async def update_post(
    post_id: int,
    post_in: BlogPostUpdate,
    current_user: User = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db)
):
    """更新文章，处理发布状态切换"""
    post = await get_existing_post(db, post_id)

    updates = post_in.model_dump(exclude_none=True, exclude={"is_published"})
    if "slug" in updates and updates["slug"] != post.slug:
        if await blog_store.get_blog_post_by_slug(db, updates["slug"]):
            raise BadRequestError("文章 slug 已存在")

    apply_publish_transition(post, post_in.is_published, updates)
    affected = await blog_store.update_blog_post(db, post_id, updates)
    return AffectedResponse(affected=affected)


@router.delete("/posts/{post_id}", response_model=AffectedResponse, name="blog.delete")
async def delete_post(
    post_id: int,
    current_user: User = Depends(get_admin_user),
    db: AsyncSession = Depends(get_db)
):
    """删除文章及其评论、点赞"""
    await get_existing_post(db, post_id)
    affected = await blog_store.delete_blog_post(db, post_id)
    return AffectedResponse(affected=affected)
