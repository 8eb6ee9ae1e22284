"""博客、评论、点赞、通知相关 Schema"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List


# ==================== 文章 ====================

class BlogPostCreate(BaseModel):
    """创建文章"""
    title: str = Field(..., min_length=1, max_length=500)
    slug: str = Field(..., min_length=1, max_length=500)
    content: str
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    category_id: Optional[int] = None
    tags: Optional[str] = None
    is_published: bool = False


class BlogPostUpdate(BaseModel):
    """更新文章"""
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    slug: Optional[str] = Field(None, min_length=1, max_length=500)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    category_id: Optional[int] = None
    tags: Optional[str] = None
    is_published: Optional[bool] = None


class BlogPostResponse(BaseModel):
    """文章响应"""
    id: int
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    category_id: Optional[int] = None
    author_id: int
    tags: Optional[str] = None
    view_count: int
    is_published: bool
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ==================== 评论 ====================

class CommentCreate(BaseModel):
    """发表评论"""
    post_id: int
    content: str = Field(..., min_length=1)
    parent_id: Optional[int] = None


class CommentResponse(BaseModel):
    """评论响应"""
    id: int
    content: str
    post_id: int
    author_id: int
    parent_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ==================== 点赞 ====================

class LikeToggle(BaseModel):
    """点赞/取消点赞"""
    post_id: int


class LikeResponse(BaseModel):
    """点赞记录"""
    id: int
    post_id: int
    user_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class PostLikesResponse(BaseModel):
    """文章点赞统计"""
    count: int
    likes: List[LikeResponse] = []


class LikeToggleResponse(BaseModel):
    """点赞切换结果"""
    liked: bool


# ==================== 通知 ====================

class NotificationResponse(BaseModel):
    """通知响应"""
    id: int
    user_id: int
    type: str
    title: str
    content: Optional[str] = None
    related_id: Optional[int] = None
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True
