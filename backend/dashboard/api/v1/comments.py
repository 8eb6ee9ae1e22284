"""评论路由"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ...database import get_db
from ...errors import NotFoundError
from ...models import User
from ...schemas import CommentCreate, CommentResponse, IdResponse, AffectedResponse
from ...services.notifications import notify_post_author
from ...store import blog as blog_store
from ...store import comments as comment_store
from ..deps import get_current_user

router = APIRouter()


@router.get("", response_model=List[CommentResponse], name="comments.listByPost")
async def list_comments(post_id: int = Query(...), db: AsyncSession = Depends(get_db)):
    """文章评论"""
    return await comment_store.get_comments_by_post(db, post_id)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED, name="comments.create")
async def create_comment(
    comment_in: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """发表评论，并通知文章作者"""
    if not await blog_store.get_blog_post_by_id(db, comment_in.post_id):
        raise NotFoundError("文章不存在")

    if comment_in.parent_id is not None:
        parent = await comment_store.get_comment_by_id(db, comment_in.parent_id)
        if not parent or parent.post_id != comment_in.post_id:
            raise NotFoundError("回复的评论不存在")

    comment_id = await comment_store.create_comment(
        db,
        author_id=current_user.id,
        **comment_in.model_dump(),
    )
    await notify_post_author(db, comment_in.post_id, current_user, "comment")
    return IdResponse(id=comment_id)


@router.delete("/{comment_id}", response_model=AffectedResponse, name="comments.delete")
async def delete_comment(
    comment_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """删除评论

    TODO: 校验评论作者或文章作者，目前任何登录用户都可以删除
    """
    affected = await comment_store.delete_comment(db, comment_id)
    if not affected:
        raise NotFoundError("评论不存在")
    return AffectedResponse(affected=affected)
