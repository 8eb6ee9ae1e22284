"""AI 辅助路由"""
from fastapi import APIRouter, Depends

from ...models import User
from ...schemas import ContentRequest, SummaryResponse, TagsResponse, ImproveResponse
from ...services import llm
from ..deps import get_current_user_detached

router = APIRouter()


@router.post("/summary", response_model=SummaryResponse, name="ai.generateSummary")
async def generate_summary(
    request: ContentRequest,
    current_user: User = Depends(get_current_user_detached)
):
    """生成摘要"""
    return SummaryResponse(summary=await llm.generate_summary(request.content))


@router.post("/tags", response_model=TagsResponse, name="ai.generateTags")
async def generate_tags(
    request: ContentRequest,
    current_user: User = Depends(get_current_user_detached)
):
    """生成标签"""
    return TagsResponse(tags=await llm.generate_tags(request.content))


@router.post("/improve", response_model=ImproveResponse, name="ai.improveWriting")
async def improve_writing(
    request: ContentRequest,
    current_user: User = Depends(get_current_user_detached)
):
    """润色文本"""
    return ImproveResponse(improved=await llm.improve_writing(request.content))
