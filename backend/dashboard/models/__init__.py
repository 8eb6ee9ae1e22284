"""数据模型"""
from .user import User
from .document import Category, Document, File
from .blog import BlogPost, Comment, Like, Notification
from .health import HealthRecord
from .finance import Transaction, Balance

__all__ = [
    "User",
    "Category", "Document", "File",
    "BlogPost", "Comment", "Like", "Notification",
    "HealthRecord",
    "Transaction", "Balance",
]
