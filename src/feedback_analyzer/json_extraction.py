"""
Locate a JSON object inside free-form model output

The reply may wrap the JSON in prose. The candidate span runs from the first
'{' to the last '}' inclusive, so braces in surrounding prose widen the span
and make the parse fail rather than silently picking a fragment.
"""

import json
import logging
from typing import Any, Dict

from .exceptions import ResponseFormatError

logger = logging.getLogger(__name__)


def find_json_span(text: str):
    """
    Return (start, end) of the first-'{'-to-last-'}' span, end exclusive,
    or None when the text has no such span.
    """
    start = text.find('{')
    end = text.rfind('}')
    if start == -1 or end < start:
        return None
    return start, end + 1


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Parse the JSON object embedded in a model reply

    Args:
        text: Raw reply text

    Returns:
        The decoded object

    Raises:
        ResponseFormatError: no brace span, or the span is not valid JSON.
            Carries at most 500 characters of the raw reply.
    """
    span = find_json_span(text)
    if span is None:
        logger.error(f"No JSON found in response: {text[:500]}")
        raise ResponseFormatError("No JSON found in response", text)

    try:
        return json.loads(text[span[0]:span[1]])
    except json.JSONDecodeError as e:
        logger.error(f"JSON parse error: {e}")
        logger.debug(f"Raw response: {text}")
        raise ResponseFormatError(f"Invalid JSON in response: {e}", text)
