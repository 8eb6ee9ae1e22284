"""AI 辅助与语音转写 Schema"""
from pydantic import BaseModel, Field
from typing import Optional, List


class ContentRequest(BaseModel):
    """待处理文本"""
    content: str


class SummaryResponse(BaseModel):
    summary: str


class TagsResponse(BaseModel):
    tags: List[str] = []


class ImproveResponse(BaseModel):
    improved: str


class TranscribeRequest(BaseModel):
    """语音转写请求"""
    audio_url: str = Field(..., min_length=1)
    language: Optional[str] = None


class TranscribeResponse(BaseModel):
    text: str
    language: Optional[str] = None
