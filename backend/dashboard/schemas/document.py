"""文档、分类、文件相关 Schema"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, Literal


# ==================== 分类 ====================

class CategoryCreate(BaseModel):
    """创建分类"""
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    color: Optional[str] = None


class CategoryResponse(BaseModel):
    """分类响应"""
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    color: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


# ==================== 文档 ====================

DocumentFormat = Literal["markdown", "richtext"]


class DocumentCreate(BaseModel):
    """创建文档"""
    title: str = Field(..., min_length=1, max_length=500)
    content: str
    format: DocumentFormat = "markdown"
    category_id: Optional[int] = None
    tags: Optional[str] = None
    is_public: bool = False


class DocumentUpdate(BaseModel):
    """更新文档（只合并传入的字段）"""
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    content: Optional[str] = None
    format: Optional[DocumentFormat] = None
    category_id: Optional[int] = None
    tags: Optional[str] = None
    is_public: Optional[bool] = None


class DocumentResponse(BaseModel):
    """文档响应"""
    id: int
    title: str
    content: str
    format: str
    category_id: Optional[int] = None
    author_id: int
    tags: Optional[str] = None
    is_public: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ==================== 文件 ====================

class FileUpload(BaseModel):
    """上传文件（content 为 base64 编码）"""
    filename: str = Field(..., min_length=1, max_length=255)
    content: str
    mime_type: str
    document_id: Optional[int] = None


class FileResponse(BaseModel):
    """文件响应"""
    id: int
    filename: str
    file_key: str
    url: str
    mime_type: Optional[str] = None
    size: Optional[int] = None
    uploader_id: int
    document_id: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True
