"""Scripture text endpoints: chapter content, search, interlinear, audio translation."""

from typing import Optional
from fastapi import APIRouter, Depends

from ..api.dependencies import get_auth_context
from ..auth import AuthContext
from ..models.model_gateway import GeminiGateway, get_model_gateway
from ..schemas.common import CALLABLE_ERROR_RESPONSES, CallableRequest, CallableResponse
from ..workflows.operations import (
    AUDIO_TRANSLATION,
    BIBLE_CONTENT,
    BIBLE_SEARCH,
    INTERLINEAR_CHAPTER,
)
from ..workflows.pipeline import run_operation

router = APIRouter(prefix="", tags=["Scripture"], responses=CALLABLE_ERROR_RESPONSES)


@router.post("/getBibleContent", response_model=CallableResponse, summary="Get Chapter Text")
async def get_bible_content(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """
    Return the full text of one chapter, one verse per line.

    Public domain translations (KJV, ASV, WEB, YLT, DBY) are requested
    verbatim; any other translation is rendered in its style. A refusal on
    recitation grounds comes back as FAILED_PRECONDITION suggesting a
    public domain translation.

    Example `data`:
    ```json
    {"book": "John", "chapter": 3, "translation": "KJV"}
    ```
    """
    return CallableResponse(result=await run_operation(BIBLE_CONTENT, body.data, auth, gateway))


@router.post("/searchBibleReferences", response_model=CallableResponse, summary="Search Bible References")
async def search_bible_references(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Find passages matching a free-text query. Result key: `results`."""
    return CallableResponse(result=await run_operation(BIBLE_SEARCH, body.data, auth, gateway))


@router.post("/generateInterlinearChapter", response_model=CallableResponse, summary="Interlinear Verses")
async def generate_interlinear_chapter(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Word-by-word original-language breakdown for a verse range. Result key: `verses`."""
    return CallableResponse(result=await run_operation(INTERLINEAR_CHAPTER, body.data, auth, gateway))


@router.post("/translateForAudio", response_model=CallableResponse, summary="Translate For Audio")
async def translate_for_audio(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Translate a passage into `targetLang`, phrased for reading aloud."""
    return CallableResponse(result=await run_operation(AUDIO_TRANSLATION, body.data, auth, gateway))
