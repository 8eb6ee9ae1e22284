"""健康记录存储操作"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import HealthRecord
from .base import insert, update_by_id, delete_by_id


async def get_health_records_by_user(db: AsyncSession, user_id: int, limit: int = 30) -> List[HealthRecord]:
    result = await db.execute(
        select(HealthRecord)
        .where(HealthRecord.user_id == user_id)
        .order_by(HealthRecord.date.desc(), HealthRecord.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_health_record_by_id(db: AsyncSession, record_id: int) -> Optional[HealthRecord]:
    return await db.get(HealthRecord, record_id)


async def create_health_record(
    db: AsyncSession,
    user_id: int,
    date: datetime,
    sleep_hours: Optional[int] = None,
    sleep_quality: Optional[str] = None,
    meals: Optional[str] = None,
    water: Optional[int] = None,
    exercise: Optional[str] = None,
    exercise_duration: Optional[int] = None,
    mood: Optional[str] = None,
    notes: Optional[str] = None,
) -> int:
    return await insert(db, HealthRecord(
        user_id=user_id,
        date=date,
        sleep_hours=sleep_hours,
        sleep_quality=sleep_quality,
        meals=meals,
        water=water,
        exercise=exercise,
        exercise_duration=exercise_duration,
        mood=mood,
        notes=notes,
    ))


async def update_health_record(db: AsyncSession, record_id: int, data: Dict[str, Any]) -> int:
    return await update_by_id(db, HealthRecord, record_id, data)


async def delete_health_record(db: AsyncSession, record_id: int) -> int:
    return await delete_by_id(db, HealthRecord, record_id)
