"""点赞路由"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...database import get_db
from ...errors import NotFoundError
from ...models import User
from ...schemas import LikeToggle, PostLikesResponse, LikeToggleResponse
from ...services.notifications import notify_post_author
from ...store import blog as blog_store
from ...store import likes as like_store
from ..deps import get_current_user

router = APIRouter()


@router.get("", response_model=PostLikesResponse, name="likes.getByPost")
async def get_post_likes(post_id: int = Query(...), db: AsyncSession = Depends(get_db)):
    """文章点赞数与点赞列表"""
    likes = await like_store.get_likes_by_post(db, post_id)
    return PostLikesResponse(count=len(likes), likes=likes)


@router.post("/toggle", response_model=LikeToggleResponse, name="likes.toggle")
async def toggle_like(
    like_in: LikeToggle,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """点赞/取消点赞；只有点赞时通知作者"""
    if not await blog_store.get_blog_post_by_id(db, like_in.post_id):
        raise NotFoundError("文章不存在")

    existing = await like_store.get_user_like_for_post(db, like_in.post_id, current_user.id)
    if existing:
        await like_store.delete_like(db, like_in.post_id, current_user.id)
        return LikeToggleResponse(liked=False)

    await like_store.create_like(db, post_id=like_in.post_id, user_id=current_user.id)
    await notify_post_author(db, like_in.post_id, current_user, "like")
    return LikeToggleResponse(liked=True)
