"""分类存储操作"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Category
from .base import insert


async def get_all_categories(db: AsyncSession) -> List[Category]:
    result = await db.execute(select(Category).order_by(Category.id))
    return list(result.scalars().all())


async def get_category_by_id(db: AsyncSession, category_id: int) -> Optional[Category]:
    return await db.get(Category, category_id)


async def get_category_by_slug(db: AsyncSession, slug: str) -> Optional[Category]:
    result = await db.execute(select(Category).where(Category.slug == slug))
    return result.scalar_one_or_none()


async def create_category(
    db: AsyncSession,
    name: str,
    slug: str,
    description: Optional[str] = None,
    color: Optional[str] = None,
) -> int:
    return await insert(db, Category(
        name=name,
        slug=slug,
        description=description,
        color=color or "#ef4444",
    ))
