"""仪表盘路由"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...database import get_db
from ...models import User
from ...schemas import DashboardStats
from ...store import blog as blog_store
from ...store import documents as document_store
from ...store import files as file_store
from ...store import notifications as notification_store
from ..deps import get_current_user

router = APIRouter()

RECENT_LIMIT = 5


@router.get("/stats", response_model=DashboardStats, name="dashboard.stats")
async def get_stats(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """统计数据；文章数只对管理员计算"""
    documents = await document_store.get_documents_by_author(db, current_user.id)
    files = await file_store.get_files_by_uploader(db, current_user.id)
    posts = await blog_store.get_all_blog_posts(db, include_unpublished=True) if current_user.is_admin else []
    unread = await notification_store.get_notifications_by_user(db, current_user.id, unread_only=True)

    return DashboardStats(
        document_count=len(documents),
        file_count=len(files),
        blog_post_count=len(posts),
        unread_notifications=len(unread),
        recent_documents=documents[:RECENT_LIMIT],
        recent_files=files[:RECENT_LIMIT],
    )
