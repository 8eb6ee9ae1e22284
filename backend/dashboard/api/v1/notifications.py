"""通知路由"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ...database import get_db
from ...errors import NotFoundError
from ...models import User
from ...schemas import NotificationResponse, AffectedResponse
from ...store import notifications as notification_store
from ..deps import get_current_user

router = APIRouter()


@router.get("", response_model=List[NotificationResponse], name="notifications.list")
async def list_notifications(
    unread_only: bool = False,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """我的通知"""
    return await notification_store.get_notifications_by_user(db, current_user.id, unread_only)


@router.post("/read-all", response_model=AffectedResponse, name="notifications.markAllAsRead")
async def mark_all_as_read(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """全部标为已读"""
    affected = await notification_store.mark_all_notifications_as_read(db, current_user.id)
    return AffectedResponse(affected=affected)


@router.post("/{notification_id}/read", response_model=AffectedResponse, name="notifications.markAsRead")
async def mark_as_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """标为已读（不校验通知归属）"""
    affected = await notification_store.mark_notification_as_read(db, notification_id)
    if not affected:
        raise NotFoundError("通知不存在")
    return AffectedResponse(affected=affected)
