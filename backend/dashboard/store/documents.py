"""文档存储操作"""
from typing import Any, Dict, List, Optional

from sqlalchemy import select, or_, func
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Document
from .base import insert, update_by_id, delete_by_id


async def get_documents_by_author(db: AsyncSession, author_id: int) -> List[Document]:
    """作者的文档，最近更新的在前"""
    result = await db.execute(
        select(Document)
        .where(Document.author_id == author_id)
        .order_by(Document.updated_at.desc(), Document.id.desc())
    )
    return list(result.scalars().all())


async def get_document_by_id(db: AsyncSession, document_id: int) -> Optional[Document]:
    return await db.get(Document, document_id)


async def create_document(
    db: AsyncSession,
    title: str,
    content: str,
    author_id: int,
    format: str = "markdown",
    category_id: Optional[int] = None,
    tags: Optional[str] = None,
    is_public: bool = False,
) -> int:
    return await insert(db, Document(
        title=title,
        content=content,
        format=format or "markdown",
        category_id=category_id,
        author_id=author_id,
        tags=tags,
        is_public=bool(is_public),
    ))


async def update_document(db: AsyncSession, document_id: int, data: Dict[str, Any]) -> int:
    return await update_by_id(db, Document, document_id, data)


async def delete_document(db: AsyncSession, document_id: int) -> int:
    # 关联文件保持不动，document_id 成为悬空引用
    return await delete_by_id(db, Document, document_id)


async def search_documents(
    db: AsyncSession,
    query: str,
    author_id: Optional[int] = None,
) -> List[Document]:
    """标题或正文包含 query（区分大小写）"""
    stmt = select(Document).where(
        or_(
            func.instr(Document.title, query) > 0,
            func.instr(Document.content, query) > 0,
        )
    )
    if author_id is not None:
        stmt = stmt.where(Document.author_id == author_id)

    result = await db.execute(stmt.order_by(Document.updated_at.desc(), Document.id.desc()))
    return list(result.scalars().all())
