"""
HTTP fetching and feed parsing.

Every network request of a run goes through fetch_url(): one GET, redirects
followed, no retries. fetch_feed() layers feedparser on top and converts
the parsed entries into RawEntry objects.

Both return result objects instead of raising, so the caller decides how to
degrade.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import feedparser
import httpx

from ..config import FetchConfig
from ..core.types import RawEntry, Source
from .normalizer import raw_entry_from_feedparser


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either content will be populated (success) or error will be populated
    (failure), but never both. status_code may be None for network-level
    failures.

    Attributes:
        url: Final URL after redirects (the requested URL on failure)
        status_code: HTTP status code, or None if request failed before getting response
        content: The raw response body, or None on error
        text: The decoded response body, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    content: bytes | None
    text: str | None
    error: str | None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class FeedResult:
    """Parsed entries of one source, or the reason it could not be read."""
    source: Source
    entries: list[RawEntry] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_client(cfg: FetchConfig) -> httpx.Client:
    """Create the HTTP client shared by all requests of a run."""
    return httpx.Client(
        timeout=cfg.timeout_seconds,
        headers={"User-Agent": cfg.user_agent},
        follow_redirects=True,
        trust_env=cfg.trust_env,
    )


def fetch_url(url: str, cfg: FetchConfig, client: httpx.Client | None = None) -> FetchResult:
    """Fetch a URL once with httpx.

    Args:
        url: The URL to fetch
        cfg: Fetch settings (timeout, user agent, proxy handling)
        client: Optional shared client; a short-lived one is created otherwise

    Returns:
        FetchResult with body on success or error message on failure.
        HTTP error statuses count as failures.
    """
    try:
        if client is None:
            with build_client(cfg) as own_client:
                resp = own_client.get(url)
        else:
            resp = client.get(url)
    except Exception as exc:  # noqa: BLE001
        return FetchResult(url=url, status_code=None, content=None, text=None,
                           error=f"{type(exc).__name__}: {exc}")

    if resp.status_code >= 400:
        return FetchResult(url=str(resp.url), status_code=resp.status_code, content=None,
                           text=None, error=f"HTTP {resp.status_code}")
    return FetchResult(url=str(resp.url), status_code=resp.status_code, content=resp.content,
                       text=resp.text, error=None)


def fetch_feed(source: Source, cfg: FetchConfig, client: httpx.Client | None = None) -> FeedResult:
    """Fetch and parse one RSS/Atom feed.

    A document feedparser flags as malformed is still accepted as long as it
    yielded entries; a malformed document without entries is a failure.
    """
    result = fetch_url(source.url, cfg, client)
    if not result.ok or result.content is None:
        return FeedResult(source=source, error=result.error or "empty response")

    try:
        parsed = feedparser.parse(result.content)
    except Exception as exc:  # noqa: BLE001
        return FeedResult(source=source, error=f"{type(exc).__name__}: {exc}")

    if parsed.get("bozo") and not parsed.entries:
        exc = parsed.get("bozo_exception")
        reason = f"{type(exc).__name__}: {exc}" if exc else "malformed feed"
        return FeedResult(source=source, error=reason)

    entries = [raw_entry_from_feedparser(entry) for entry in parsed.entries]
    return FeedResult(source=source, entries=entries)
