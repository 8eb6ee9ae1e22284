"""用户相关 Schema"""
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class UserResponse(BaseModel):
    """用户响应"""
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: str
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime

    class Config:
        from_attributes = True
