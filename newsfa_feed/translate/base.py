"""
Translation capability.

A translator exposes a single operation, translate(text, target_lang), and
must never raise for runtime failures: empty input comes back as "",
and a missing credential, a network error or an unexpected response all
return the original text.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

import httpx

from ..core.types import Result

logger = logging.getLogger(__name__)

# Raised by httpx, by response.json() and by walking an unexpected payload.
REQUEST_ERRORS = (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError)


class Translator(Protocol):
    """Anything that can translate a string into a target language."""

    name: str

    def translate(self, text: str, target_lang: str) -> str:
        ...


def translate_or_original(
    provider: str,
    text: str,
    attempt: Callable[[], Result[str]],
) -> str:
    """Run a provider request and fall back to text on any failure."""
    if not text:
        return text
    try:
        result = attempt()
    except REQUEST_ERRORS as exc:
        result = Result.failure(f"{type(exc).__name__}: {exc}")
    if not result.ok:
        logger.warning("Translation via %s failed: %s", provider, result.error)
    return result.value_or(text)


def post_json(
    client: httpx.Client | None,
    url: str,
    **kwargs: Any,
) -> Any:
    """POST and decode a JSON response, raising on HTTP error statuses."""
    if client is None:
        with httpx.Client(timeout=20.0) as own_client:
            resp = own_client.post(url, **kwargs)
            resp.raise_for_status()
            return resp.json()
    resp = client.post(url, **kwargs)
    resp.raise_for_status()
    return resp.json()


def non_empty(value: Any) -> Result[str]:
    if isinstance(value, str) and value.strip():
        return Result.success(value)
    return Result.failure("empty translation in response")
