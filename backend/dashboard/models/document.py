"""文档相关模型"""
from sqlalchemy import Column, String, Boolean, DateTime, Text, Integer, ForeignKey
from datetime import datetime

from ..database import Base


class Category(Base):
    """分类表"""
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    color = Column(String(20), default="#ef4444")
    created_at = Column(DateTime, default=datetime.utcnow)


class Document(Base):
    """文档表"""
    __tablename__ = "documents"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False, default="")
    format = Column(String(20), nullable=False, default="markdown")  # markdown / richtext
    category_id = Column(Integer, nullable=True, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tags = Column(Text, nullable=True)  # JSON 字符串
    is_public = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow)


class File(Base):
    """上传文件表"""
    __tablename__ = "files"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(500), nullable=False)  # 原始文件名
    file_key = Column(String(500), nullable=False)  # 存储键
    url = Column(Text, nullable=False)
    mime_type = Column(String(100), nullable=True)
    size = Column(Integer, nullable=True)  # 字节
    uploader_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # 只记录 ID，文档删除后不级联
    document_id = Column(Integer, nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
