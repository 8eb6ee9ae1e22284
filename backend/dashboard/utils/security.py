"""安全相关工具

访问令牌由外部身份服务签发，``sub`` 为用户的 open_id。
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Optional
from jose import jwt, JWTError

from ..config import settings


def create_access_token(open_id: str, **claims: Any) -> str:
    """创建访问令牌"""
    expire = datetime.utcnow() + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        **claims,
        "sub": open_id,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """解码令牌"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError:
        return None
