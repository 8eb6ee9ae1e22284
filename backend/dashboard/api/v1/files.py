"""文件路由"""
import base64
import binascii
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ...config import settings
from ...database import Database, get_database, get_db
from ...errors import BadRequestError, NotFoundError
from ...models import User
from ...schemas import FileUpload, FileResponse, IdResponse, AffectedResponse
from ...services.storage import build_file_key, storage_put
from ...store import files as file_store
from ..deps import get_current_user, get_current_user_detached, ensure_owner_or_admin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[FileResponse], name="files.list")
async def list_files(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """我上传的文件"""
    return await file_store.get_files_by_uploader(db, current_user.id)


@router.post("/upload", response_model=IdResponse, status_code=status.HTTP_201_CREATED, name="files.upload")
async def upload_file(
    file_in: FileUpload,
    current_user: User = Depends(get_current_user_detached),
    database: Database = Depends(get_database)
):
    """上传文件

    先写入文件存储，再记录元数据；写存储期间不占用数据库锁。
    """
    try:
        data = base64.b64decode(file_in.content, validate=True)
    except (binascii.Error, ValueError):
        raise BadRequestError("文件内容不是合法的 base64")

    if len(data) > settings.MAX_UPLOAD_SIZE:
        raise BadRequestError(f"文件过大，最大支持 {settings.MAX_UPLOAD_SIZE // 1024 // 1024}MB")

    file_key = build_file_key(current_user.id, file_in.filename)
    stored = await storage_put(file_key, data, file_in.mime_type)

    async with database.session() as db:
        file_id = await file_store.create_file(
            db,
            filename=file_in.filename,
            file_key=stored["key"],
            url=stored["url"],
            mime_type=file_in.mime_type,
            size=len(data),
            uploader_id=current_user.id,
            document_id=file_in.document_id,
        )
    logger.info("用户 %s 上传文件 %s", current_user.id, file_key)
    return IdResponse(id=file_id)


@router.delete("/{file_id}", response_model=AffectedResponse, name="files.delete")
async def delete_file(
    file_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """删除文件记录"""
    file = await file_store.get_file_by_id(db, file_id)
    if not file:
        raise NotFoundError("文件不存在")
    ensure_owner_or_admin(file.uploader_id, current_user)

    affected = await file_store.delete_file(db, file_id)
    return AffectedResponse(affected=affected)
