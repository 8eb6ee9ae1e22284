"""语音转写

返回 ``{"text", "language"}``，失败时返回 ``{"error": ...}``，由路由层决定如何上报。
"""
import logging
from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..utils.http_client import get_shared_client, extract_error_message

logger = logging.getLogger(__name__)


async def transcribe_audio(audio_url: str, language: Optional[str] = None) -> Dict[str, Any]:
    if not settings.VOICE_API_URL:
        return {"error": "语音转写服务未配置"}

    headers = {"Content-Type": "application/json"}
    if settings.VOICE_API_KEY:
        headers["Authorization"] = f"Bearer {settings.VOICE_API_KEY}"

    body: Dict[str, Any] = {"audio_url": audio_url}
    if language:
        body["language"] = language

    client = get_shared_client()
    try:
        response = await client.post(settings.VOICE_API_URL, headers=headers, json=body)
    except httpx.TimeoutException:
        return {"error": "语音转写请求超时"}
    except httpx.RequestError as e:
        return {"error": f"语音转写请求失败: {e}"}

    if response.status_code != 200:
        detail = extract_error_message(response)
        logger.warning("语音转写失败 %s: %s", response.status_code, detail)
        return {"error": f"语音转写失败: {detail}"}

    try:
        data = response.json()
    except ValueError:
        return {"error": "语音转写返回了无法解析的响应"}

    if not isinstance(data, dict) or not isinstance(data.get("text"), str):
        return {"error": "语音转写返回格式异常"}

    return {"text": data["text"], "language": data.get("language") or language}
