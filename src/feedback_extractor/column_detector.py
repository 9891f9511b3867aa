"""
Feedback column detector - picks the columns likely to hold free text

A header matches when a keyword appears inside its normalized form, or when
the normalized form appears inside a keyword. The second direction lets
abbreviated headers such as "desc" through, and also lets very
short headers such as "re" match "recommendation".
"""

import re
import logging
from typing import List, Sequence

from .config import FEEDBACK_KEYWORDS

logger = logging.getLogger(__name__)

_NON_LETTERS = re.compile(r"[^a-z]")


def normalize_header(header: str) -> str:
    """Lower-case and keep only the letters a-z"""
    return _NON_LETTERS.sub('', header.lower())


def is_feedback_header(header: str) -> bool:
    """Check a single header against the keyword vocabulary"""
    normalized = normalize_header(header)
    return any(
        keyword in normalized or normalized in keyword
        for keyword in FEEDBACK_KEYWORDS
    )


def detect_feedback_columns(headers: Sequence[str]) -> List[int]:
    """
    Select the indices of headers that look like feedback columns

    Args:
        headers: Header row of the parsed CSV

    Returns:
        Matching indices in header order. Never empty: falls back to [0]
        when nothing matches.
    """
    detected = [index for index, header in enumerate(headers) if is_feedback_header(header)]

    if not detected:
        logger.debug("No feedback keyword in headers, assuming first column")
        return [0]

    return detected


def describe_columns(headers: Sequence[str], columns: Sequence[int]) -> List[str]:
    """Header name for each selected index, 'Column <i>' when missing or blank"""
    names = []
    for index in columns:
        name = headers[index] if index < len(headers) else ''
        names.append(name or f"Column {index}")
    return names
