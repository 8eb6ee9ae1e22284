"""实体存储操作

每个函数接收一个 ``AsyncSession``；创建返回新 ID，更新/删除返回受影响行数。
"""
from . import users, categories, documents, files, blog, comments, likes, notifications, health, finance
from .seed import seed_defaults

__all__ = [
    "users", "categories", "documents", "files", "blog", "comments",
    "likes", "notifications", "health", "finance",
    "seed_defaults",
]
