"""博客文章存储操作

列表统一按发布时间倒序，未发布的文章按创建时间参与排序。
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select, delete, or_, func
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import BlogPost, Comment, Like
from .base import insert, update_by_id, delete_by_id


def _newest_first(stmt):
    return stmt.order_by(
        func.coalesce(BlogPost.published_at, BlogPost.created_at).desc(),
        BlogPost.id.desc(),
    )


async def get_all_blog_posts(db: AsyncSession, include_unpublished: bool = False) -> List[BlogPost]:
    stmt = select(BlogPost)
    if not include_unpublished:
        stmt = stmt.where(BlogPost.is_published == True)  # noqa: E712
    result = await db.execute(_newest_first(stmt))
    return list(result.scalars().all())


async def get_blog_posts_by_category(db: AsyncSession, category_id: int) -> List[BlogPost]:
    stmt = select(BlogPost).where(
        BlogPost.category_id == category_id,
        BlogPost.is_published == True,  # noqa: E712
    )
    result = await db.execute(_newest_first(stmt))
    return list(result.scalars().all())


async def get_blog_post_by_slug(db: AsyncSession, slug: str) -> Optional[BlogPost]:
    result = await db.execute(select(BlogPost).where(BlogPost.slug == slug))
    return result.scalar_one_or_none()


async def get_blog_post_by_id(db: AsyncSession, post_id: int) -> Optional[BlogPost]:
    return await db.get(BlogPost, post_id)


async def create_blog_post(
    db: AsyncSession,
    title: str,
    slug: str,
    content: str,
    author_id: int,
    excerpt: Optional[str] = None,
    cover_image: Optional[str] = None,
    category_id: Optional[int] = None,
    tags: Optional[str] = None,
    is_published: bool = False,
    published_at: Optional[datetime] = None,
) -> int:
    return await insert(db, BlogPost(
        title=title,
        slug=slug,
        content=content,
        excerpt=excerpt,
        cover_image=cover_image,
        category_id=category_id,
        author_id=author_id,
        tags=tags,
        view_count=0,
        is_published=bool(is_published),
        published_at=published_at,
    ))


async def update_blog_post(db: AsyncSession, post_id: int, data: Dict[str, Any]) -> int:
    return await update_by_id(db, BlogPost, post_id, data)


async def delete_blog_post(db: AsyncSession, post_id: int) -> int:
    """删除文章及其评论、点赞"""
    affected = await delete_by_id(db, BlogPost, post_id)
    if affected:
        await db.execute(delete(Comment).where(Comment.post_id == post_id))
        await db.execute(delete(Like).where(Like.post_id == post_id))
    return affected


async def increment_blog_post_views(db: AsyncSession, post_id: int) -> int:
    """浏览数 +1，不去重"""
    post = await db.get(BlogPost, post_id)
    if post is None:
        return 0
    post.view_count = (post.view_count or 0) + 1
    await db.flush()
    return 1


async def search_blog_posts(db: AsyncSession, query: str) -> List[BlogPost]:
    """已发布文章的标题或正文包含 query（区分大小写）"""
    stmt = select(BlogPost).where(
        BlogPost.is_published == True,  # noqa: E712
        or_(
            func.instr(BlogPost.title, query) > 0,
            func.instr(BlogPost.content, query) > 0,
        ),
    )
    result = await db.execute(_newest_first(stmt))
    return list(result.scalars().all())
