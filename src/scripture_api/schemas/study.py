"""Study, analysis and devotional schemas."""

from typing import List, Optional
from pydantic import Field, StrictInt

from .common import LanguageInput, OperationInput, OptionalNumber


class PassageRequest(LanguageInput):
    """A chapter plus its text, for storyboards and location lookups."""
    book: str = Field(..., min_length=1)
    chapter: StrictInt = Field(..., gt=0)
    text: str = Field(..., min_length=10, description="Passage text the model works from")
    age: OptionalNumber = Field(None, description="Reader age, if the audience matters")


class StoryboardRequest(PassageRequest):
    pass


class LocationsRequest(PassageRequest):
    pass


class AnalysisRequest(LanguageInput):
    """Theology or exegesis essay over a passage or reference."""
    book: Optional[str] = None
    chapter: OptionalNumber = None
    context: str = Field(..., min_length=10)
    reference_title: Optional[str] = Field(None, alias="referenceTitle")


class LibraryResource(OperationInput):
    title: str
    text_content: Optional[str] = Field(None, alias="textContent")


class LibraryAgentRequest(LanguageInput):
    """Question answered from a set of user-supplied documents."""
    query: str = Field(..., min_length=3)
    resources: List[LibraryResource]


class DevotionalRequest(LanguageInput):
    topic: str = Field(..., min_length=1)
    age: OptionalNumber = None


class StudyGuideRequest(LanguageInput):
    theme: str = Field(..., min_length=1)
    context: str = Field(..., min_length=10)
    age: OptionalNumber = None


class ThematicStudyRequest(LanguageInput):
    topic: str = Field(..., min_length=1)
    age: OptionalNumber = None


class CustomMapRequest(LanguageInput):
    """Map analysis for a free topic (a journey, a period, a people)."""
    topic: str = Field(..., min_length=1)
