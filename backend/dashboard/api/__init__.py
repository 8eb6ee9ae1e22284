"""API 路由"""
from fastapi import APIRouter
from .v1 import (
    auth, categories, documents, files, blog, comments, likes,
    notifications, health, finance, dashboard, ai, voice,
)

api_router = APIRouter()

# 注册路由
api_router.include_router(auth.router, prefix="/auth", tags=["认证"])
api_router.include_router(categories.router, prefix="/categories", tags=["分类"])
api_router.include_router(documents.router, prefix="/documents", tags=["文档"])
api_router.include_router(files.router, prefix="/files", tags=["文件"])
api_router.include_router(blog.router, prefix="/blog", tags=["博客"])
api_router.include_router(comments.router, prefix="/comments", tags=["评论"])
api_router.include_router(likes.router, prefix="/likes", tags=["点赞"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["通知"])
api_router.include_router(health.router, prefix="/health", tags=["健康"])
api_router.include_router(finance.router, prefix="/finance", tags=["财务"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["仪表盘"])
api_router.include_router(ai.router, prefix="/ai", tags=["AI"])
api_router.include_router(voice.router, prefix="/voice", tags=["语音"])
