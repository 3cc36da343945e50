"""Prompts for study aids: storyboards, maps, essays, devotionals and images."""

from typing import Optional, Union

from ..schemas.media import ImageRequest
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


STORYBOARD_PROMPT = """Create a storyboard with 3-5 scenes for {book} {chapter}. Text: {text}.{audience}
Return JSON {{ "scenes": [{{ "title": "...", "description": "...", "verses": [] }}] }}. Respond in {language}."""


LOCATIONS_PROMPT = """Identify the locations in {book} {chapter}. Text: {text}.{audience}
Return JSON {{ "locations": [{{ "name": "...", "lat": 0, "lng": 0, "verses": [], "description": "..." }}] }}. Respond in {language}."""


THEOLOGY_PROMPT = """Systematic theological analysis of {reference}. Style: Wayne Grudem. Language: {language}. Context: {context}"""


EXEGESIS_PROMPT = """Exegesis and homiletics of: {reference}. Language: {language}. Context: {context}"""


LIBRARY_AGENT_PROMPT = """You are the Eden Agent. Answer the question: "{query}" using the following books:

{library}

Respond in {language}. Cite your sources."""


DEVOTIONAL_PROMPT = """Create a daily devotional about "{topic}" for readers of {audience} ages in {language}.
Return JSON {{ "title": "...", "scriptureReference": "...", "scriptureText": "...", "reflection": "...", "prayer": "...", "finalQuote": "..." }}."""


STUDY_GUIDE_PROMPT = """Bible study guide on "{theme}" in {language}.{audience} Context: {context}"""


THEMATIC_STUDY_PROMPT = """Thematic study plan on "{topic}" in {language}.{audience}"""


CUSTOM_MAP_PROMPT = """Act as a biblical cartographer. Topic: "{topic}". Identify the locations.
Return JSON {{ "locations": [{{ "biblicalName": "...", "modernName": "...", "description": "..." }}], "regionDescription": "..." }}. Language: {language}."""


def _audience_note(age: Optional[Union[int, float]]) -> str:
    if age is None:
        return ""
    return f" Audience age: {age:g}."


def _analysis_reference(request: AnalysisRequest) -> str:
    if request.reference_title:
        return request.reference_title
    if request.book and request.chapter is not None:
        return f"{request.book} {request.chapter:g}"
    return request.book or "the passage below"


def get_storyboard_prompt(request: StoryboardRequest, language: str) -> str:
    return STORYBOARD_PROMPT.format(
        book=request.book,
        chapter=request.chapter,
        text=request.text,
        audience=_audience_note(request.age),
        language=language,
    )


def get_locations_prompt(request: LocationsRequest, language: str) -> str:
    return LOCATIONS_PROMPT.format(
        book=request.book,
        chapter=request.chapter,
        text=request.text,
        audience=_audience_note(request.age),
        language=language,
    )


def get_theology_prompt(request: AnalysisRequest, language: str) -> str:
    return THEOLOGY_PROMPT.format(
        reference=_analysis_reference(request),
        context=request.context,
        language=language,
    )


def get_exegesis_prompt(request: AnalysisRequest, language: str) -> str:
    return EXEGESIS_PROMPT.format(
        reference=_analysis_reference(request),
        context=request.context,
        language=language,
    )


def get_library_agent_prompt(request: LibraryAgentRequest, language: str) -> str:
    """
    Build the multi-document question prompt.

    Each resource is inlined under its own header so the model can cite it
    by title.

    Args:
        request: Validated library request
        language: Display language name

    Returns:
        Formatted prompt string
    """
    library = "\n\n".join(
        f"--- BOOK: {resource.title} ---\n{resource.text_content or ''}"
        for resource in request.resources
    )
    return LIBRARY_AGENT_PROMPT.format(query=request.query, library=library, language=language)


def get_devotional_prompt(request: DevotionalRequest, language: str) -> str:
    audience = f"{request.age:g}" if request.age is not None else "all"
    return DEVOTIONAL_PROMPT.format(topic=request.topic, audience=audience, language=language)


def get_study_guide_prompt(request: StudyGuideRequest, language: str) -> str:
    return STUDY_GUIDE_PROMPT.format(
        theme=request.theme,
        context=request.context,
        audience=_audience_note(request.age),
        language=language,
    )


def get_thematic_study_prompt(request: ThematicStudyRequest, language: str) -> str:
    return THEMATIC_STUDY_PROMPT.format(
        topic=request.topic,
        audience=_audience_note(request.age),
        language=language,
    )


def get_custom_map_prompt(request: CustomMapRequest, language: str) -> str:
    return CUSTOM_MAP_PROMPT.format(topic=request.topic, language=language)


def get_image_prompt(request: ImageRequest, language: str) -> str:
    # Image prompts are sent as written.
    return request.prompt
