"""
Text sanitizer - strips markup from user supplied strings.

Uses nh3 with an empty tag allow-list, so every tag is removed and only the
text content survives. Clients render the text as plain text, so entities in
the cleaned output are unescaped. Unescaping can expose markup that arrived
entity-encoded (``&lt;script&gt;``), so clean and unescape repeat until the
text no longer changes; the result never contains a tag nh3 would remove.
"""

import html
import logging

import nh3

from chatroom.domain.exceptions import DomainValidationError, InternalError

logger = logging.getLogger(__name__)

MAX_PASSES = 5


def _clean_once(value: str) -> str:
    try:
        cleaned = nh3.clean(value, tags=set(), attributes={})
    except Exception as e:
        logger.error(f"[Sanitizer] Failed to clean text: {e}", exc_info=True)
        raise InternalError("Could not process text") from e
    return html.unescape(cleaned)


def sanitize_text(value: str) -> str:
    """Return ``value`` without markup, trimmed."""
    text = value
    for _ in range(MAX_PASSES):
        cleaned = _clean_once(text)
        if cleaned == text:
            return cleaned.strip()
        text = cleaned
    raise DomainValidationError("Text is nested too deeply in encoded markup")
