"""点赞存储操作

同一 (post_id, user_id) 至多一条，由 toggle 逻辑保证。
"""
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Like
from .base import insert


async def get_likes_by_post(db: AsyncSession, post_id: int) -> List[Like]:
    result = await db.execute(select(Like).where(Like.post_id == post_id).order_by(Like.id))
    return list(result.scalars().all())


async def get_user_like_for_post(db: AsyncSession, post_id: int, user_id: int) -> Optional[Like]:
    result = await db.execute(
        select(Like).where(Like.post_id == post_id, Like.user_id == user_id)
    )
    return result.scalars().first()


async def create_like(db: AsyncSession, post_id: int, user_id: int) -> int:
    return await insert(db, Like(post_id=post_id, user_id=user_id))


async def delete_like(db: AsyncSession, post_id: int, user_id: int) -> int:
    result = await db.execute(
        delete(Like).where(Like.post_id == post_id, Like.user_id == user_id)
    )
    return result.rowcount
