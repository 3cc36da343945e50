"""Lexicon endpoints: word definitions and keyword analysis."""

from typing import Optional
from fastapi import APIRouter, Depends

from ..api.dependencies import get_auth_context
from ..auth import AuthContext
from ..models.model_gateway import GeminiGateway, get_model_gateway
from ..schemas.common import CALLABLE_ERROR_RESPONSES, CallableRequest, CallableResponse
from ..workflows.operations import KEYWORD_ANALYSIS, WORD_DEFINITION
from ..workflows.pipeline import run_operation

router = APIRouter(prefix="", tags=["Lexicon"], responses=CALLABLE_ERROR_RESPONSES)


@router.post("/getWordDefinition", response_model=CallableResponse, summary="Word Definition")
async def get_word_definition(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """
    Lexicon entry for one original-language word.

    Example `data`:
    ```json
    {"original": "λόγος", "strong": "G3056", "context": "John 1:1"}
    ```
    """
    return CallableResponse(result=await run_operation(WORD_DEFINITION, body.data, auth, gateway))


@router.post("/analyzeKeywordsInVerse", response_model=CallableResponse, summary="Verse Keywords")
async def analyze_keywords_in_verse(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Key original-language words of a verse. Result key: `keywords`."""
    return CallableResponse(result=await run_operation(KEYWORD_ANALYSIS, body.data, auth, gateway))
