"""Definitions of every model-backed callable operation."""

from typing import Any, Dict, Optional

from ..config import Settings
from ..errors import CallableError, ErrorCode
from ..prompts.scripture import (
    get_audio_translation_prompt,
    get_bible_content_prompt,
    get_interlinear_prompt,
    get_keyword_analysis_prompt,
    get_search_prompt,
    get_word_definition_prompt,
)
from ..prompts.study import (
    get_custom_map_prompt,
    get_devotional_prompt,
    get_exegesis_prompt,
    get_image_prompt,
    get_library_agent_prompt,
    get_locations_prompt,
    get_storyboard_prompt,
    get_study_guide_prompt,
    get_thematic_study_prompt,
    get_theology_prompt,
)
from ..schemas.lexicon import KeywordAnalysisRequest, WordDefinitionRequest
from ..schemas.media import HD_MODEL_TYPE, ImageRequest
from ..schemas.scripture import (
    AudioTranslateRequest,
    BibleContentRequest,
    BibleSearchRequest,
    InterlinearRequest,
)
from ..schemas.study import (
    AnalysisRequest,
    CustomMapRequest,
    DevotionalRequest,
    LibraryAgentRequest,
    LocationsRequest,
    StoryboardRequest,
    StudyGuideRequest,
    ThematicStudyRequest,
)
from .pipeline import OperationSpec, OutputMode


RECITATION_MARKER = "RECITATION"
RECITATION_GUIDANCE = (
    "Could not retrieve this specific translation. "
    "Try a public-domain translation such as KJV or ASV."
)


def translate_recitation_error(error: Exception) -> Optional[CallableError]:
    """Map a provider recitation refusal to actionable guidance."""
    if RECITATION_MARKER in str(error):
        return CallableError(ErrorCode.FAILED_PRECONDITION, RECITATION_GUIDANCE)
    return None


def _content_model(request: BibleContentRequest, settings: Settings) -> str:
    return settings.content_model


def _image_model(request: ImageRequest, settings: Settings) -> str:
    if request.model_type == HD_MODEL_TYPE:
        return settings.image_model_hd
    return settings.image_model


def _bible_content_result(request: BibleContentRequest, text: str) -> Dict[str, Any]:
    return {
        "success": True,
        "text": text,
        "book": request.book,
        "chapter": request.chapter,
        "translation": request.translation,
    }


BIBLE_CONTENT = OperationSpec(
    name="getBibleContent",
    schema=BibleContentRequest,
    build_prompt=get_bible_content_prompt,
    select_model=_content_model,
    shape_result=_bible_content_result,
    translate_error=translate_recitation_error,
)

STORYBOARD = OperationSpec(
    name="generateStoryboard",
    schema=StoryboardRequest,
    build_prompt=get_storyboard_prompt,
    output_mode=OutputMode.JSON_OBJECT,
    payload_kind="storyboard",
)

BIBLICAL_LOCATIONS = OperationSpec(
    name="findBiblicalLocations",
    schema=LocationsRequest,
    build_prompt=get_locations_prompt,
    output_mode=OutputMode.JSON_OBJECT,
    payload_kind="locations",
)

THEOLOGY_ANALYSIS = OperationSpec(
    name="generateTheologyAnalysis",
    schema=AnalysisRequest,
    build_prompt=get_theology_prompt,
)

EXEGESIS_ANALYSIS = OperationSpec(
    name="generateExegesisAnalysis",
    schema=AnalysisRequest,
    build_prompt=get_exegesis_prompt,
)

LIBRARY_AGENT = OperationSpec(
    name="askLibraryAgent",
    schema=LibraryAgentRequest,
    build_prompt=get_library_agent_prompt,
)

DAILY_DEVOTIONAL = OperationSpec(
    name="generateDailyDevotional",
    schema=DevotionalRequest,
    build_prompt=get_devotional_prompt,
    output_mode=OutputMode.JSON_OBJECT,
    payload_kind="devotional",
)

STUDY_GUIDE = OperationSpec(
    name="generateStudyGuide",
    schema=StudyGuideRequest,
    build_prompt=get_study_guide_prompt,
)

THEMATIC_STUDY = OperationSpec(
    name="generateThematicStudy",
    schema=ThematicStudyRequest,
    build_prompt=get_thematic_study_prompt,
)

AUDIO_TRANSLATION = OperationSpec(
    name="translateForAudio",
    schema=AudioTranslateRequest,
    build_prompt=get_audio_translation_prompt,
    language_field="target_lang",
)

WORD_DEFINITION = OperationSpec(
    name="getWordDefinition",
    schema=WordDefinitionRequest,
    build_prompt=get_word_definition_prompt,
    output_mode=OutputMode.JSON_OBJECT,
    payload_kind="word definition",
)

KEYWORD_ANALYSIS = OperationSpec(
    name="analyzeKeywordsInVerse",
    schema=KeywordAnalysisRequest,
    build_prompt=get_keyword_analysis_prompt,
    output_mode=OutputMode.JSON_ARRAY,
    payload_kind="keywords",
    result_key="keywords",
)

INTERLINEAR_CHAPTER = OperationSpec(
    name="generateInterlinearChapter",
    schema=InterlinearRequest,
    build_prompt=get_interlinear_prompt,
    output_mode=OutputMode.JSON_ARRAY,
    payload_kind="interlinear",
    result_key="verses",
)

BIBLE_SEARCH = OperationSpec(
    name="searchBibleReferences",
    schema=BibleSearchRequest,
    build_prompt=get_search_prompt,
    output_mode=OutputMode.JSON_ARRAY,
    payload_kind="search",
    result_key="results",
)

CUSTOM_MAP_ANALYSIS = OperationSpec(
    name="generateCustomMapAnalysis",
    schema=CustomMapRequest,
    build_prompt=get_custom_map_prompt,
    output_mode=OutputMode.JSON_OBJECT,
    payload_kind="map analysis",
)

IMAGE = OperationSpec(
    name="generateImage",
    schema=ImageRequest,
    build_prompt=get_image_prompt,
    output_mode=OutputMode.IMAGE,
    select_model=_image_model,
    safety_settings=None,
)


OPERATIONS = {
    spec.name: spec
    for spec in (
        BIBLE_CONTENT,
        STORYBOARD,
        BIBLICAL_LOCATIONS,
        THEOLOGY_ANALYSIS,
        EXEGESIS_ANALYSIS,
        LIBRARY_AGENT,
        DAILY_DEVOTIONAL,
        STUDY_GUIDE,
        THEMATIC_STUDY,
        AUDIO_TRANSLATION,
        WORD_DEFINITION,
        KEYWORD_ANALYSIS,
        INTERLINEAR_CHAPTER,
        BIBLE_SEARCH,
        CUSTOM_MAP_ANALYSIS,
        IMAGE,
    )
}
