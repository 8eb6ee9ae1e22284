"""用户存储操作"""
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import User
from .base import insert


async def get_user_by_open_id(db: AsyncSession, open_id: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.open_id == open_id))
    return result.scalar_one_or_none()


async def upsert_user(
    db: AsyncSession,
    open_id: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    login_method: Optional[str] = None,
    role: Optional[str] = None,
    last_signed_in: Optional[datetime] = None,
) -> User:
    """按 open_id 创建或合并用户

    只合并显式传入的字段；已有用户的角色只有在传入 role 时才会改变。
    """
    user = await get_user_by_open_id(db, open_id)
    if user is not None:
        updates = {
            "name": name,
            "email": email,
            "login_method": login_method,
            "role": role,
            "last_signed_in": last_signed_in,
        }
        for key, value in updates.items():
            if value is not None:
                setattr(user, key, value)
        user.updated_at = datetime.utcnow()
        await db.flush()
        return user

    user = User(
        open_id=open_id,
        name=name,
        email=email,
        login_method=login_method,
        role=role or "user",
        last_signed_in=last_signed_in or datetime.utcnow(),
    )
    await insert(db, user)
    return user
