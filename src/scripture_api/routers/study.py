"""Study content endpoints."""

from typing import Optional
from fastapi import APIRouter, Depends

from ..api.dependencies import get_auth_context
from ..auth import AuthContext
from ..models.model_gateway import GeminiGateway, get_model_gateway
from ..schemas.common import CALLABLE_ERROR_RESPONSES, CallableRequest, CallableResponse
from ..workflows.operations import (
    BIBLICAL_LOCATIONS,
    CUSTOM_MAP_ANALYSIS,
    DAILY_DEVOTIONAL,
    EXEGESIS_ANALYSIS,
    LIBRARY_AGENT,
    STORYBOARD,
    STUDY_GUIDE,
    THEMATIC_STUDY,
    THEOLOGY_ANALYSIS,
)
from ..workflows.pipeline import run_operation

router = APIRouter(prefix="", tags=["Study"], responses=CALLABLE_ERROR_RESPONSES)


@router.post("/generateStoryboard", response_model=CallableResponse, summary="Passage Storyboard")
async def generate_storyboard(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """
    Break a passage into illustrated scenes.

    The model's JSON object is spread into the result next to `success`.
    """
    return CallableResponse(result=await run_operation(STORYBOARD, body.data, auth, gateway))


@router.post("/findBiblicalLocations", response_model=CallableResponse, summary="Passage Locations")
async def find_biblical_locations(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Places mentioned in a passage, with coordinates."""
    return CallableResponse(result=await run_operation(BIBLICAL_LOCATIONS, body.data, auth, gateway))


@router.post("/generateTheologyAnalysis", response_model=CallableResponse, summary="Systematic Theology")
async def generate_theology_analysis(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Markdown systematic-theology analysis of the given context."""
    return CallableResponse(result=await run_operation(THEOLOGY_ANALYSIS, body.data, auth, gateway))


@router.post("/generateExegesisAnalysis", response_model=CallableResponse, summary="Exegesis")
async def generate_exegesis_analysis(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Markdown exegetical analysis of the given context."""
    return CallableResponse(result=await run_operation(EXEGESIS_ANALYSIS, body.data, auth, gateway))


@router.post("/askLibraryAgent", response_model=CallableResponse, summary="Library Agent")
async def ask_library_agent(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Answer a question grounded in the caller's own library resources."""
    return CallableResponse(result=await run_operation(LIBRARY_AGENT, body.data, auth, gateway))


@router.post("/generateDailyDevotional", response_model=CallableResponse, summary="Daily Devotional")
async def generate_daily_devotional(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    return CallableResponse(result=await run_operation(DAILY_DEVOTIONAL, body.data, auth, gateway))


@router.post("/generateStudyGuide", response_model=CallableResponse, summary="Study Guide")
async def generate_study_guide(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    return CallableResponse(result=await run_operation(STUDY_GUIDE, body.data, auth, gateway))


@router.post("/generateThematicStudy", response_model=CallableResponse, summary="Thematic Study")
async def generate_thematic_study(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    return CallableResponse(result=await run_operation(THEMATIC_STUDY, body.data, auth, gateway))


@router.post("/generateCustomMapAnalysis", response_model=CallableResponse, summary="Custom Map Analysis")
async def generate_custom_map_analysis(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """Places relevant to a free-form topic, with a region description."""
    return CallableResponse(result=await run_operation(CUSTOM_MAP_ANALYSIS, body.data, auth, gateway))
