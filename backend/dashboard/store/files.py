"""文件存储操作"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import File
from .base import insert, delete_by_id


async def get_files_by_uploader(db: AsyncSession, uploader_id: int) -> List[File]:
    result = await db.execute(
        select(File)
        .where(File.uploader_id == uploader_id)
        .order_by(File.created_at.desc(), File.id.desc())
    )
    return list(result.scalars().all())


async def get_file_by_id(db: AsyncSession, file_id: int) -> Optional[File]:
    return await db.get(File, file_id)


async def create_file(
    db: AsyncSession,
    filename: str,
    file_key: str,
    url: str,
    uploader_id: int,
    mime_type: Optional[str] = None,
    size: Optional[int] = None,
    document_id: Optional[int] = None,
) -> int:
    return await insert(db, File(
        filename=filename,
        file_key=file_key,
        url=url,
        mime_type=mime_type,
        size=size,
        uploader_id=uploader_id,
        document_id=document_id,
    ))


async def delete_file(db: AsyncSession, file_id: int) -> int:
    return await delete_by_id(db, File, file_id)
