"""健康记录路由

记录只对本人可见，访问他人的记录按不存在处理。
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ...database import get_db
from ...models import User, HealthRecord
from ...schemas import (
    HealthRecordCreate, HealthRecordUpdate, HealthRecordResponse,
    IdResponse, AffectedResponse,
)
from ...store import health as health_store
from ..deps import get_current_user, ensure_owner

router = APIRouter()


async def get_own_record(db: AsyncSession, record_id: int, user: User) -> HealthRecord:
    record = await health_store.get_health_record_by_id(db, record_id)
    ensure_owner(record, record.user_id if record else None, user, "健康记录不存在")
    return record


@router.get("/records", response_model=List[HealthRecordResponse], name="health.list")
async def list_records(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """最近 30 条健康记录"""
    return await health_store.get_health_records_by_user(db, current_user.id)


@router.get("/records/{record_id}", response_model=HealthRecordResponse, name="health.getById")
async def get_record(
    record_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """获取单条健康记录"""
    return await get_own_record(db, record_id, current_user)


@router.post("/records", response_model=IdResponse, status_code=status.HTTP_201_CREATED, name="health.create")
async def create_record(
    record_in: HealthRecordCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """创建健康记录"""
    record_id = await health_store.create_health_record(
        db,
        user_id=current_user.id,
        **record_in.model_dump(),
    )
    return IdResponse(id=record_id)


@router.patch("/records/{record_id}", response_model=AffectedResponse, name="health.update")
async def update_record(
    record_id: int,
    record_in: HealthRecordUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """更新健康记录"""
    await get_own_record(db, record_id, current_user)
    affected = await health_store.update_health_record(
        db, record_id, record_in.model_dump(exclude_none=True)
    )
    return AffectedResponse(affected=affected)


@router.delete("/records/{record_id}", response_model=AffectedResponse, name="health.delete")
async def delete_record(
    record_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """删除健康记录"""
    await get_own_record(db, record_id, current_user)
    affected = await health_store.delete_health_record(db, record_id)
    return AffectedResponse(affected=affected)
