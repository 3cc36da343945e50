"""Locate and parse the JSON payload embedded in free model text."""

import json
import logging
import re
from typing import Any, Callable, Optional


logger = logging.getLogger("scripture_api.extraction")

# text -> parsed JSON value, or None when nothing usable was found
JsonExtractor = Callable[[str], Optional[Any]]

_ARRAY_SPAN = re.compile(r"\[[\s\S]*\]")
_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")


def extract_json(text: Optional[str]) -> Optional[Any]:
    """
    Extract one top-level JSON object or array from surrounding prose.

    Whichever of ``[`` or ``{`` appears first decides the mode; the span from
    that first bracket to the last matching closing bracket is parsed. No
    depth matching is done, so stray brackets in leading prose can shift the
    span.

    Args:
        text: Raw model output

    Returns:
        The parsed value, or None when no span is found or it is not valid JSON
    """
    if not text:
        logger.error("No JSON found in empty response")
        return None

    first_brace = text.find("{")
    first_bracket = text.find("[")

    if first_bracket != -1 and (first_brace == -1 or first_bracket < first_brace):
        match = _ARRAY_SPAN.search(text)
    else:
        match = _OBJECT_SPAN.search(text)

    if not match:
        logger.error("No JSON found in response. Raw text: %s", text)
        return None

    try:
        return json.loads(match.group(0))
    except (ValueError, RecursionError) as e:
        logger.error("Failed to parse JSON: %s\nText that failed: %s", e, text)
        return None
