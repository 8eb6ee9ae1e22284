"""通用存储操作

更新和删除返回受影响的行数（0 或 1），由路由层把 0 转成 404。
"""
from datetime import datetime
from typing import Any, Dict, Type

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Base


async def insert(db: AsyncSession, record: Base) -> int:
    """写入一条记录，返回分配的 ID"""
    db.add(record)
    await db.flush()
    return record.id


async def update_by_id(
    db: AsyncSession,
    model: Type[Base],
    record_id: int,
    data: Dict[str, Any],
    touch: bool = True,
) -> int:
    """按 ID 合并字段"""
    record = await db.get(model, record_id)
    if record is None:
        return 0

    for key, value in data.items():
        setattr(record, key, value)
    if touch:
        record.updated_at = datetime.utcnow()

    await db.flush()
    return 1


async def delete_by_id(db: AsyncSession, model: Type[Base], record_id: int) -> int:
    """按 ID 删除"""
    result = await db.execute(delete(model).where(model.id == record_id))
    return result.rowcount
