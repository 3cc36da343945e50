"""Lexical lookup schemas."""

from typing import Optional
from pydantic import Field

from .common import LanguageInput


class WordDefinitionRequest(LanguageInput):
    """Define an original-language word, optionally by Strong's number."""
    original: str = Field(..., min_length=1)
    strong: Optional[str] = None
    context: str = Field(..., min_length=1)


class KeywordAnalysisRequest(LanguageInput):
    """Find the key original-language words of one verse."""
    reference: str = Field(..., min_length=1)
    verse_text: str = Field(..., min_length=1, alias="verseText")
