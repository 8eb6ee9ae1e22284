"""认证路由"""
from fastapi import APIRouter, Depends
from typing import Optional

from ...models import User
from ...schemas import UserResponse
from ..deps import get_optional_user

router = APIRouter()


@router.get("/me", response_model=Optional[UserResponse], name="auth.me")
async def get_me(current_user: Optional[User] = Depends(get_optional_user)):
    """获取当前用户信息，未登录时返回 null"""
    return current_user
