"""LLM 调用（OpenAI 兼容接口）

只做单次请求/响应，不重试、不缓存。任何失败都抛出 ``UpstreamError``。
"""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..errors import UpstreamError
from ..utils.http_client import get_shared_client, extract_error_message

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful assistant that generates concise summaries. "
    "Respond in the same language as the input."
)
TAGS_SYSTEM_PROMPT = (
    "You are a helpful assistant that generates relevant tags for content. "
    "Return only a JSON array of 3-5 tags."
)
IMPROVE_SYSTEM_PROMPT = (
    "You are a professional writing assistant. Improve the given text while maintaining "
    "its original meaning and tone. Respond in the same language as the input."
)

TAGS_RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "tags",
        "strict": True,
        "schema": {
            "type": "object",
            "properties": {
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Array of relevant tags",
                },
            },
            "required": ["tags"],
            "additionalProperties": False,
        },
    },
}


async def invoke_llm(
    messages: List[Dict[str, str]],
    response_format: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """调用 chat/completions，返回原始 JSON"""
    if not settings.LLM_API_KEY:
        raise UpstreamError("LLM 服务未配置")

    payload: Dict[str, Any] = {
        "model": settings.LLM_MODEL,
        "messages": messages,
        "stream": False,
    }
    if response_format is not None:
        payload["response_format"] = response_format

    client = get_shared_client()
    try:
        response = await client.post(
            f"{settings.LLM_BASE_URL.rstrip('/')}/chat/completions",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {settings.LLM_API_KEY}",
            },
            json=payload,
        )
    except httpx.TimeoutException:
        logger.warning("LLM 请求超时")
        raise UpstreamError("LLM 请求超时")
    except httpx.RequestError as e:
        logger.warning("LLM 请求失败: %s", e)
        raise UpstreamError(f"LLM 请求失败: {e}")

    if response.status_code != 200:
        detail = extract_error_message(response)
        logger.warning("LLM API 错误 %s: %s", response.status_code, detail)
        raise UpstreamError(f"LLM API 错误: {detail}")

    try:
        return response.json()
    except ValueError:
        raise UpstreamError("LLM 返回了无法解析的响应")


def _message_content(result: Dict[str, Any]) -> str:
    """取第一条候选的文本，没有候选时返回空串"""
    try:
        choices = result.get("choices") or []
        if not choices:
            return ""
        content = choices[0]["message"].get("content")
    except (AttributeError, KeyError, TypeError):
        raise UpstreamError("LLM 返回格式异常")
    return content if isinstance(content, str) else ""


async def generate_summary(content: str) -> str:
    """生成 2-3 句摘要"""
    result = await invoke_llm([
        {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
        {"role": "user", "content": f"Please summarize the following content in 2-3 sentences:\n\n{content}"},
    ])
    return _message_content(result)


async def generate_tags(content: str) -> List[str]:
    """生成 3-5 个标签"""
    result = await invoke_llm(
        [
            {"role": "system", "content": TAGS_SYSTEM_PROMPT},
            {"role": "user", "content": f"Generate relevant tags for this content:\n\n{content}"},
        ],
        response_format=TAGS_RESPONSE_FORMAT,
    )
    raw = _message_content(result) or '{"tags":[]}'
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        raise UpstreamError("LLM 返回的标签不是合法 JSON")

    tags = parsed.get("tags") if isinstance(parsed, dict) else parsed
    if not isinstance(tags, list):
        raise UpstreamError("LLM 返回的标签格式异常")
    return [str(tag) for tag in tags]


async def improve_writing(content: str) -> str:
    """润色文本"""
    result = await invoke_llm([
        {"role": "system", "content": IMPROVE_SYSTEM_PROMPT},
        {"role": "user", "content": content},
    ])
    return _message_content(result)
