"""Parsers for the keyword and default response files."""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Could you elaborate on that?"


def parse_keyword_text(text: str) -> Dict[str, str]:
    """Build the keyword table from ``key1,key2`` / response / blank records.

    Every record in the text is loaded. Keys and responses are trimmed and
    lowercased; a key seen again later maps to the later response.
    """
    table: Dict[str, str] = {}
    lines = text.splitlines()
    index = 0

    while index < len(lines):
        keyword_line = lines[index].strip().lower()
        index += 1
        if not keyword_line:
            continue

        keys = [key.strip() for key in keyword_line.split(",")]
        keys = [key for key in keys if key]

        if index >= len(lines):
            logger.warning("keyword line %r has no response line", keyword_line)
            break
        response = lines[index].strip().lower()
        index += 1

        if not keys:
            logger.warning("skipping record with no keywords in %r", keyword_line)
            continue

        for key in keys:
            table[key] = response

    return table


def parse_default_text(text: str, fallback: str = FALLBACK_RESPONSE) -> Tuple[str, ...]:
    """Split blank-line separated paragraphs into default responses.

    Lines of one paragraph are concatenated as written. The result always
    holds at least ``fallback``.
    """
    responses: List[str] = []
    paragraph = ""

    for line in text.splitlines():
        if line.strip():
            paragraph += line
        elif paragraph:
            responses.append(paragraph)
            paragraph = ""

    if paragraph:
        responses.append(paragraph)

    if not responses:
        responses.append(fallback)
    return tuple(responses)
