"""API 依赖：身份解析与权限校验

- 公开接口：不需要身份
- 受保护接口：``get_current_user``，未解析出身份返回 401
- 管理员接口：``get_admin_user``，非 admin 返回 403
- 资源级校验：``ensure_owner_or_admin`` / ``ensure_owner``，在任何写操作之前调用
"""
import logging
from datetime import datetime
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..database import Database, get_database, get_db
from ..errors import ForbiddenError, NotFoundError, UnauthorizedError
from ..models import User
from ..store import users as user_store
from ..utils.security import decode_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def resolve_user(
    db: AsyncSession,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[User]:
    """解析请求身份

    有 Bearer 令牌时按 ``sub``（open_id）同步用户；没有令牌且开启演示模式时
    使用演示用户；否则返回 None。无效令牌不会回退到演示用户。
    """
    if credentials is not None:
        payload = decode_token(credentials.credentials)
        if payload is None or payload.get("type") != "access" or not payload.get("sub"):
            return None

        open_id = payload["sub"]
        existing = await user_store.get_user_by_open_id(db, open_id)
        role = None
        if existing is None:
            role = "admin" if open_id == settings.OWNER_OPEN_ID else "user"
            logger.info("新用户登录: %s (role=%s)", open_id, role)

        return await user_store.upsert_user(
            db,
            open_id=open_id,
            name=payload.get("name"),
            email=payload.get("email"),
            login_method=payload.get("login_method"),
            role=role,
            last_signed_in=datetime.utcnow(),
        )

    if settings.DEMO_MODE:
        return await user_store.get_user_by_open_id(db, settings.DEMO_OPEN_ID)
    return None


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """公开接口使用：可能为 None"""
    return await resolve_user(db, credentials)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """获取当前用户"""
    if user is None:
        raise UnauthorizedError()
    return user


async def get_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """获取管理员用户"""
    if not current_user.is_admin:
        raise ForbiddenError("需要管理员权限")
    return current_user


async def get_current_user_detached(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    database: Database = Depends(get_database),
) -> User:
    """用独立的短会话解析身份

    用于需要等待外部服务的接口（LLM、语音、上传），等待期间不占用存储锁。
    """
    async with database.session() as db:
        user = await resolve_user(db, credentials)
    if user is None:
        raise UnauthorizedError()
    return user


def ensure_owner_or_admin(owner_id: int, user: User, message: str = "无权访问"):
    """资源所有者或管理员"""
    if owner_id != user.id and not user.is_admin:
        raise ForbiddenError(message)


def ensure_owner(record, owner_id: Optional[int], user: User, message: str = "记录不存在"):
    """仅所有者可见：他人的记录按不存在处理"""
    if record is None or owner_id != user.id:
        raise NotFoundError(message)
