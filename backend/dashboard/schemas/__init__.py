"""Pydantic Schemas"""
from .common import IdResponse, AffectedResponse
from .user import UserResponse
from .document import (
    CategoryCreate, CategoryResponse,
    DocumentCreate, DocumentUpdate, DocumentResponse,
    FileUpload, FileResponse,
)
from .blog import (
    BlogPostCreate, BlogPostUpdate, BlogPostResponse,
    CommentCreate, CommentResponse,
    LikeToggle, LikeResponse, PostLikesResponse, LikeToggleResponse,
    NotificationResponse,
)
from .health import HealthRecordCreate, HealthRecordUpdate, HealthRecordResponse
from .finance import (
    TransactionCreate, TransactionUpdate, TransactionResponse,
    FinanceSummary, BalanceCreate, BalanceResponse,
)
from .ai import (
    ContentRequest, SummaryResponse, TagsResponse, ImproveResponse,
    TranscribeRequest, TranscribeResponse,
)
from .dashboard import DashboardStats

__all__ = [
    "IdResponse", "AffectedResponse",
    "UserResponse",
    "CategoryCreate", "CategoryResponse",
    "DocumentCreate", "DocumentUpdate", "DocumentResponse",
    "FileUpload", "FileResponse",
    "BlogPostCreate", "BlogPostUpdate", "BlogPostResponse",
    "CommentCreate", "CommentResponse",
    "LikeToggle", "LikeResponse", "PostLikesResponse", "LikeToggleResponse",
    "NotificationResponse",
    "HealthRecordCreate", "HealthRecordUpdate", "HealthRecordResponse",
    "TransactionCreate", "TransactionUpdate", "TransactionResponse",
    "FinanceSummary", "BalanceCreate", "BalanceResponse",
    "ContentRequest", "SummaryResponse", "TagsResponse", "ImproveResponse",
    "TranscribeRequest", "TranscribeResponse",
    "DashboardStats",
]
