"""文件存储

配置了 STORAGE_API_URL 时上传到远端，否则写入本地 UPLOAD_DIR。
"""
import logging
import os
import uuid
from typing import Dict

import aiofiles
import aiofiles.os
import httpx

from ..config import settings
from ..errors import UpstreamError
from ..utils.http_client import get_shared_client, extract_error_message

logger = logging.getLogger(__name__)


def build_file_key(user_id: int, filename: str) -> str:
    """生成存储键: {user_id}/files/{随机串}-{文件名}"""
    safe_name = os.path.basename(filename.replace("\\", "/")) or "file"
    return f"{user_id}/files/{uuid.uuid4().hex[:12]}-{safe_name}"


async def _put_remote(key: str, data: bytes, content_type: str) -> str:
    headers = {}
    if settings.STORAGE_API_KEY:
        headers["Authorization"] = f"Bearer {settings.STORAGE_API_KEY}"

    client = get_shared_client()
    try:
        response = await client.post(
            f"{settings.STORAGE_API_URL.rstrip('/')}/upload",
            params={"path": key},
            files={"file": (os.path.basename(key), data, content_type)},
            headers=headers,
        )
    except httpx.RequestError as e:
        raise UpstreamError(f"文件存储请求失败: {e}")

    if response.status_code != 200:
        raise UpstreamError(f"文件存储失败: {extract_error_message(response)}")

    try:
        url = response.json().get("url")
    except (ValueError, AttributeError):
        url = None
    if not url:
        raise UpstreamError("文件存储未返回 URL")
    return url


async def _put_local(key: str, data: bytes) -> str:
    file_path = os.path.join(settings.UPLOAD_DIR, *key.split("/"))
    try:
        await aiofiles.os.makedirs(os.path.dirname(file_path), exist_ok=True)
        async with aiofiles.open(file_path, "wb") as f:
            await f.write(data)
    except OSError as e:
        raise UpstreamError(f"文件保存失败: {e}")
    return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/uploads/{key}"


async def storage_put(key: str, data: bytes, content_type: str) -> Dict[str, str]:
    """保存文件，返回 ``{"key", "url"}``"""
    if settings.STORAGE_API_URL:
        url = await _put_remote(key, data, content_type)
    else:
        url = await _put_local(key, data)
    logger.info("文件已保存: %s (%d bytes)", key, len(data))
    return {"key": key, "url": url}
