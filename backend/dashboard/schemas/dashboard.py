"""仪表盘 Schema"""
from pydantic import BaseModel
from typing import List

from .document import DocumentResponse, FileResponse


class DashboardStats(BaseModel):
    """仪表盘统计"""
    document_count: int
    file_count: int
    blog_post_count: int
    unread_notifications: int
    recent_documents: List[DocumentResponse] = []
    recent_files: List[FileResponse] = []
