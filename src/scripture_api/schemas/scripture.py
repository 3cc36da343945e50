"""Scripture text, search, interlinear and audio schemas."""

from pydantic import Field, StrictInt

from .common import LanguageCode, LanguageInput, OperationInput


class BibleContentRequest(LanguageInput):
    """Request a chapter of scripture."""
    book: str = Field(..., min_length=1)
    chapter: StrictInt = Field(..., gt=0)
    translation: str = Field("NVI", description="Source translation identifier, e.g. KJV or NVI")


class InterlinearRequest(LanguageInput):
    """Request a word-by-word breakdown of a verse range."""
    book: str = Field(..., min_length=1)
    chapter: StrictInt = Field(..., gt=0)
    start_verse: StrictInt = Field(..., gt=0, alias="startVerse")
    end_verse: StrictInt = Field(..., gt=0, alias="endVerse")


class BibleSearchRequest(LanguageInput):
    """Free-text search for scripture references."""
    query: str = Field(..., min_length=2)


class AudioTranslateRequest(OperationInput):
    """Translate text before speech synthesis; the target language is required."""
    text: str = Field(..., min_length=1)
    target_lang: LanguageCode = Field(..., alias="targetLang")
