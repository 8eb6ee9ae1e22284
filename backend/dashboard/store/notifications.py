"""通知存储操作"""
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Notification
from .base import insert, update_by_id


async def get_notifications_by_user(
    db: AsyncSession,
    user_id: int,
    unread_only: bool = False,
) -> List[Notification]:
    stmt = select(Notification).where(Notification.user_id == user_id)
    if unread_only:
        stmt = stmt.where(Notification.is_read == False)  # noqa: E712
    result = await db.execute(stmt.order_by(Notification.created_at.desc(), Notification.id.desc()))
    return list(result.scalars().all())


async def create_notification(
    db: AsyncSession,
    user_id: int,
    type: str,
    title: str,
    content: Optional[str] = None,
    related_id: Optional[int] = None,
) -> int:
    return await insert(db, Notification(
        user_id=user_id,
        type=type,
        title=title,
        content=content,
        related_id=related_id,
        is_read=False,
    ))


async def mark_notification_as_read(db: AsyncSession, notification_id: int) -> int:
    return await update_by_id(db, Notification, notification_id, {"is_read": True}, touch=False)


async def mark_all_notifications_as_read(db: AsyncSession, user_id: int) -> int:
    """返回本次由未读变为已读的数量"""
    result = await db.execute(
        update(Notification)
        .where(Notification.user_id == user_id, Notification.is_read == False)  # noqa: E712
        .values(is_read=True)
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount
