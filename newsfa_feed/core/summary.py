"""
Summary cleaning: HTML to short plain text.

Feed summaries arrive as anything from plain text to full article HTML.
clean_summary() reduces them to a single line of plain text suitable for a
card teaser.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

MAX_SUMMARY_CHARS = 420
ELLIPSIS = "…"

_WS_RE = re.compile(r"\s+")
_BLOCK_TAGS = ["p", "div", "br", "li", "ul", "ol", "tr", "blockquote", "h1", "h2", "h3", "h4", "h5", "h6"]

logger = logging.getLogger(__name__)


def clean_summary(raw: str | None, max_chars: int = MAX_SUMMARY_CHARS) -> str:
    """Convert an HTML summary to trimmed, truncated plain text.

    Anchors contribute only their text, never their href. Whitespace runs
    collapse to a single space. Text longer than max_chars is cut at
    max_chars and followed by an ellipsis.

    Args:
        raw: Summary as found in the feed (HTML or plain text)
        max_chars: Maximum number of characters kept before the ellipsis

    Returns:
        The cleaned text, "" for empty input, or the raw input unchanged if
        cleaning fails
    """
    if not raw:
        return ""
    try:
        text = html_to_text(raw)
        text = _WS_RE.sub(" ", text).strip()
        if len(text) > max_chars:
            text = text[:max_chars] + ELLIPSIS
        return text
    except Exception as exc:  # noqa: BLE001
        logger.debug("Summary cleaning failed: %s", exc)
        return raw


def html_to_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    # Remove non-content tags
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    # Block elements separate words; inline elements such as <b> and <a> do not
    for tag in soup(_BLOCK_TAGS):
        tag.insert_before(" ")
        tag.insert_after(" ")
    return soup.get_text()
