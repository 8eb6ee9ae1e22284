"""文档路由"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ...database import get_db
from ...errors import NotFoundError
from ...models import User, Document
from ...schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse,
    IdResponse, AffectedResponse,
)
from ...store import documents as document_store
from ..deps import get_current_user, ensure_owner_or_admin

router = APIRouter()


async def get_accessible_document(db: AsyncSession, document_id: int, user: User) -> Document:
    """先查存在，再校验所有者/管理员"""
    document = await document_store.get_document_by_id(db, document_id)
    if not document:
        raise NotFoundError("文档不存在")
    ensure_owner_or_admin(document.author_id, user)
    return document


@router.get("", response_model=List[DocumentResponse], name="documents.list")
async def list_documents(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """我的文档"""
    return await document_store.get_documents_by_author(db, current_user.id)


@router.get("/search", response_model=List[DocumentResponse], name="documents.search")
async def search_documents(
    query: str = Query(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """在我的文档中搜索标题或正文"""
    return await document_store.search_documents(db, query, author_id=current_user.id)


@router.get("/{document_id}", response_model=DocumentResponse, name="documents.getById")
async def get_document(
    document_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """获取单个文档"""
    return await get_accessible_document(db, document_id, current_user)


@router.post("", response_model=IdResponse, status_code=status.HTTP_201_CREATED, name="documents.create")
async def create_document(
    document_in: DocumentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """创建文档"""
    document_id = await document_store.create_document(
        db,
        author_id=current_user.id,
        **document_in.model_dump(),
    )
    return IdResponse(id=document_id)


@router.patch("/{document_id}", response_model=AffectedResponse, name="documents.update")
async def update_document(
    document_id: int,
    document_in: DocumentUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """更新文档"""
    await get_accessible_document(db, document_id, current_user)
    affected = await document_store.update_document(
        db, document_id, document_in.model_dump(exclude_none=True)
    )
    return AffectedResponse(affected=affected)


@router.delete("/{document_id}", response_model=AffectedResponse, name="documents.delete")
async def delete_document(
    document_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """删除文档（关联文件保留）"""
    await get_accessible_document(db, document_id, current_user)
    affected = await document_store.delete_document(db, document_id)
    return AffectedResponse(affected=affected)
