"""语音转写路由"""
from fastapi import APIRouter, Depends

from ...errors import UpstreamError
from ...models import User
from ...schemas import TranscribeRequest, TranscribeResponse
from ...services.voice import transcribe_audio
from ..deps import get_current_user_detached

router = APIRouter()


@router.post("/transcribe", response_model=TranscribeResponse, name="voice.transcribe")
async def transcribe(
    request: TranscribeRequest,
    current_user: User = Depends(get_current_user_detached)
):
    """转写音频"""
    result = await transcribe_audio(request.audio_url, request.language)
    if "error" in result:
        raise UpstreamError(result["error"])
    return TranscribeResponse(text=result["text"], language=result.get("language"))
