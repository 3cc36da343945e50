"""Prompts for scripture text, search, interlinear, lexicon and audio operations."""

from ..schemas.lexicon import KeywordAnalysisRequest, WordDefinitionRequest
from ..schemas.scripture import (
    AudioTranslateRequest,
    BibleContentRequest,
    BibleSearchRequest,
    InterlinearRequest,
)


# Translations that may be requested verbatim. Anything else is asked for
# "in the style of" to avoid reproducing copyrighted text.
PUBLIC_DOMAIN_TRANSLATIONS = ("KJV", "ASV", "WEB", "YLT", "DBY")


PUBLIC_DOMAIN_CONTENT_PROMPT = """Provide the complete text of {book} chapter {chapter} from the {translation} translation.
This is a public domain translation. Format each verse with its number.
Output the text in {language} if different from the original."""


STYLED_CONTENT_PROMPT = """Provide the text of {book} chapter {chapter} in the style of the {translation} translation.
Present each verse numbered. This should be a faithful rendering of the biblical content.
Language: {language}."""


SEARCH_PROMPT = """Biblical search for "{query}" in {language}.
Return a JSON array of [{{ "reference": "...", "text": "...", "book": "...", "chapter": 0 }}].
Maximum 5 results."""


INTERLINEAR_PROMPT = """Interlinear analysis of {book} {chapter}:{start_verse}-{end_verse} in {language}.
Return a JSON array of [{{ "verseNumber": 0, "language": "Hebrew"|"Greek", "words": [{{ "original": "...", "transliteration": "...", "translation": "...", "strong": "..." }}] }}].
The "translation" of each word must be in {language}."""


AUDIO_TRANSLATION_PROMPT = """Translate into {language} for speech synthesis: "{text}".
Only the translated text."""


WORD_DEFINITION_PROMPT = """In-depth definition of "{original}" (Strong: {strong}). Context: {context}. Language: {language}.
Return JSON {{ "original": "...", "transliteration": "...", "strong": "...", "root": "...", "morphology": "...", "definition": "...", "practicalDefinition": "...", "biblicalUsage": [], "theologicalSignificance": "..." }}."""


KEYWORD_ANALYSIS_PROMPT = """Analyze the keywords in: "{reference}: {verse_text}" in {language}.
Return a JSON array of [{{ "word": "...", "original": "...", "transliteration": "...", "strongNumber": "...", "definition": "...", "language": "Hebrew"|"Greek" }}]."""


def is_public_domain_translation(translation: str) -> bool:
    """Case-insensitive membership in the public-domain allow-list."""
    return translation.upper() in PUBLIC_DOMAIN_TRANSLATIONS


def get_bible_content_prompt(request: BibleContentRequest, language: str) -> str:
    """
    Build the chapter-retrieval prompt.

    Public-domain translations are requested verbatim with numbered verses;
    every other translation is requested as a rendering in its style.

    Args:
        request: Validated content request
        language: Display language name

    Returns:
        Formatted prompt string
    """
    template = (
        PUBLIC_DOMAIN_CONTENT_PROMPT
        if is_public_domain_translation(request.translation)
        else STYLED_CONTENT_PROMPT
    )
    return template.format(
        book=request.book,
        chapter=request.chapter,
        translation=request.translation,
        language=language,
    )


def get_search_prompt(request: BibleSearchRequest, language: str) -> str:
    return SEARCH_PROMPT.format(query=request.query, language=language)


def get_interlinear_prompt(request: InterlinearRequest, language: str) -> str:
    return INTERLINEAR_PROMPT.format(
        book=request.book,
        chapter=request.chapter,
        start_verse=request.start_verse,
        end_verse=request.end_verse,
        language=language,
    )


def get_audio_translation_prompt(request: AudioTranslateRequest, language: str) -> str:
    return AUDIO_TRANSLATION_PROMPT.format(text=request.text, language=language)


def get_word_definition_prompt(request: WordDefinitionRequest, language: str) -> str:
    return WORD_DEFINITION_PROMPT.format(
        original=request.original,
        strong=request.strong or "N/A",
        context=request.context,
        language=language,
    )


def get_keyword_analysis_prompt(request: KeywordAnalysisRequest, language: str) -> str:
    return KEYWORD_ANALYSIS_PROMPT.format(
        reference=request.reference,
        verse_text=request.verse_text,
        language=language,
    )
