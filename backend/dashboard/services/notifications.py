"""通知钩子：评论、点赞成功后通知文章作者"""
import logging
from typing import Literal, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import User
from ..store import blog as blog_store
from ..store import notifications as notification_store

logger = logging.getLogger(__name__)

PostEvent = Literal["comment", "like"]

_TITLES = {
    "comment": "New comment on your post",
    "like": "New like on your post",
}
_VERBS = {
    "comment": "commented on",
    "like": "liked",
}


async def notify_post_author(
    db: AsyncSession,
    post_id: int,
    actor: User,
    event: PostEvent,
) -> Optional[int]:
    """给文章作者发通知；作者本人操作时不发。返回通知 ID"""
    post = await blog_store.get_blog_post_by_id(db, post_id)
    if post is None or post.author_id == actor.id:
        return None

    notification_id = await notification_store.create_notification(
        db,
        user_id=post.author_id,
        type=event,
        title=_TITLES[event],
        content=f'{actor.name or "Someone"} {_VERBS[event]} "{post.title}"',
        related_id=post.id,
    )
    logger.info("通知作者 %s: %s on post %s", post.author_id, event, post.id)
    return notification_id
