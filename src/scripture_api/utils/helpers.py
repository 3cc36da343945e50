"""Utility functions for the scripture study API."""

from typing import Any, Dict, List


LANGUAGE_NAMES = {
    "pt": "PORTUGUESE",
    "en": "ENGLISH",
    "es": "SPANISH",
}

DEFAULT_LANGUAGE = "pt"


def get_language_name(lang: str) -> str:
    """
    Resolve a language code to the display name used inside prompts.

    Args:
        lang: One of the supported language codes

    Returns:
        Upper-case language name; unknown codes resolve to the default language
    """
    return LANGUAGE_NAMES.get(lang, LANGUAGE_NAMES[DEFAULT_LANGUAGE])


def format_field_path(loc: Any) -> str:
    """Join a pydantic error location into a dotted path (``resources.0.title``)."""
    return ".".join(str(part) for part in loc)


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """
    Render every validation issue as ``path: reason``.

    Args:
        errors: The output of ``ValidationError.errors()``

    Returns:
        Comma separated list of issues
    """
    return ", ".join(f"{format_field_path(err.get('loc', ()))}: {err.get('msg', 'invalid value')}" for err in errors)


def spread_payload(payload: Dict[str, Any], **fields: Any) -> Dict[str, Any]:
    """Build a success envelope from an object payload; ``success`` is never overridable."""
    envelope: Dict[str, Any] = {"success": True}
    envelope.update({k: v for k, v in payload.items() if k != "success"})
    envelope.update(fields)
    return envelope
