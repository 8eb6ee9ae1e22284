"""共享 HTTP 客户端

LLM、语音转写、远端文件存储共用一个连接池，应用关闭时统一释放。
"""
import logging
from typing import Optional

import httpx

from ..config import settings

logger = logging.getLogger(__name__)

_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_client() -> httpx.AsyncClient:
    """获取共享的 HTTP 客户端（避免每次请求都创建新客户端）"""
    global _shared_client
    if _shared_client is None or _shared_client.is_closed:
        _shared_client = httpx.AsyncClient(
            timeout=settings.HTTP_TIMEOUT,
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=50),
        )
        logger.info("创建共享 HTTP 客户端")
    return _shared_client


async def close_shared_client():
    """关闭共享客户端（应用关闭时调用）"""
    global _shared_client
    if _shared_client is not None and not _shared_client.is_closed:
        await _shared_client.aclose()
        logger.info("关闭共享 HTTP 客户端")
    _shared_client = None


def extract_error_message(response: httpx.Response) -> str:
    """从错误响应中取出可读的错误信息"""
    detail = response.text
    try:
        data = response.json()
    except ValueError:
        return detail
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            return error.get("message") or detail
        if isinstance(error, str):
            return error
        if isinstance(data.get("detail"), str):
            return data["detail"]
    return detail
