"""评论存储操作"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Comment
from .base import insert, delete_by_id


async def get_comments_by_post(db: AsyncSession, post_id: int) -> List[Comment]:
    """文章评论，按时间正序"""
    result = await db.execute(
        select(Comment)
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at, Comment.id)
    )
    return list(result.scalars().all())


async def get_comment_by_id(db: AsyncSession, comment_id: int) -> Optional[Comment]:
    return await db.get(Comment, comment_id)


async def create_comment(
    db: AsyncSession,
    content: str,
    post_id: int,
    author_id: int,
    parent_id: Optional[int] = None,
) -> int:
    return await insert(db, Comment(
        content=content,
        post_id=post_id,
        author_id=author_id,
        parent_id=parent_id,
    ))


async def delete_comment(db: AsyncSession, comment_id: int) -> int:
    # 回复通过 parent_id 弱引用，删除父评论不影响回复
    return await delete_by_id(db, Comment, comment_id)
