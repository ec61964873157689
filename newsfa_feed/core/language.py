"""Best-effort source language detection."""

from __future__ import annotations

import logging

import langcodes
from langdetect import DetectorFactory, LangDetectException, detect

UNDETERMINED = "und"
MIN_LENGTH = 10

# langdetect is randomized; a fixed seed makes repeated runs agree.
DetectorFactory.seed = 0

logger = logging.getLogger(__name__)


def detect_language(text: str | None, min_length: int = MIN_LENGTH) -> str:
    """Guess the ISO 639-3 code of text ("eng", "fas", "zho").

    Returns "und" for input shorter than min_length (after stripping) or
    when no language can be determined.
    """
    sample = (text or "").strip()
    if len(sample) < min_length:
        return UNDETERMINED
    try:
        code = detect(sample)
    except LangDetectException as exc:
        logger.debug("Language detection failed: %s", exc)
        return UNDETERMINED
    return to_alpha3(code)


def to_alpha3(code: str | None) -> str:
    """Convert a detector tag such as "en" or "zh-cn" to a three-letter code."""
    if not code or code == UNDETERMINED:
        return UNDETERMINED
    try:
        return langcodes.Language.get(code).to_alpha3()
    except (LookupError, ValueError) as exc:
        logger.debug("No three-letter code for %s: %s", code, exc)
        return UNDETERMINED
