"""启动种子数据：演示用户与两个默认分类"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from .categories import get_category_by_slug, create_category
from .users import get_user_by_open_id, upsert_user

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "技术", "slug": "tech", "description": "技术相关文章", "color": "#3b82f6"},
    {"name": "生活", "slug": "life", "description": "生活随笔", "color": "#10b981"},
]


async def seed_defaults(db: AsyncSession):
    """写入种子数据（已存在则跳过）"""
    if await get_user_by_open_id(db, settings.DEMO_OPEN_ID) is None:
        await upsert_user(
            db,
            open_id=settings.DEMO_OPEN_ID,
            name="Demo User",
            email="demo@example.com",
            role="user",
        )
        logger.info("已创建演示用户: %s", settings.DEMO_OPEN_ID)

    for category in DEFAULT_CATEGORIES:
        if await get_category_by_slug(db, category["slug"]) is None:
            await create_category(db, **category)
