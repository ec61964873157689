"""
Core data types for the feed aggregator.

This module defines the fundamental data structures used throughout the pipeline:
- Source: A configured feed to poll
- RawEntry: One feed item as extracted from the parser
- Article: The normalized record written to the snapshot
- Result: Explicit success/failure value for best-effort steps
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Source:
    """A feed to poll.

    Attributes:
        name: Display name of the publisher/feed
        url: Feed URL
        type: Source kind; only "rss" (RSS or Atom) is fetched
    """
    name: str
    url: str
    type: str = "rss"


@dataclass
class RawEntry:
    """One feed item before normalization.

    Attributes:
        link: Entry link, the canonical article URL
        title: Entry headline
        iso_date: Parsed publish (or update) timestamp in UTC, if any
        content_snippet: Plain-text summary, when the feed declares one
        summary: Summary/description field (may contain HTML)
        content: Non-HTML content body
        content_encoded: Full encoded HTML content (RSS content:encoded)
        enclosure_url: URL of the first enclosure
        media_url: URL from media:content or media:thumbnail
    """
    link: str | None = None
    title: str | None = None
    iso_date: datetime | None = None
    content_snippet: str | None = None
    summary: str | None = None
    content: str | None = None
    content_encoded: str | None = None
    enclosure_url: str | None = None
    media_url: str | None = None


@dataclass(frozen=True)
class Article:
    """A normalized news item, the unit of the JSON snapshot.

    Attributes:
        id: "<source>:<url>" truncated to 190 characters
        url: Canonical article URL, used as the dedup key
        source: Display name of the source
        title: Original headline
        title_translated: Headline in the target language
        summary: Cleaned plain-text summary
        summary_translated: Summary in the target language
        content_html: Raw embedded HTML from the feed
        image_url: Representative image URL, or None
        category: Topic category
        published_at: Publish timestamp (UTC)
        lang_original: Detected ISO 639-3 language code or "und"
        lang_translated: Target language code
    """
    id: str
    url: str
    source: str
    title: str
    title_translated: str
    summary: str
    summary_translated: str
    content_html: str
    image_url: str | None
    category: str
    published_at: datetime
    lang_original: str
    lang_translated: str

    def to_dict(self, include_content_html: bool = True) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "url": self.url,
            "source": self.source,
            "title": self.title,
            "titleTranslated": self.title_translated,
            "summary": self.summary,
            "summaryTranslated": self.summary_translated,
        }
        if include_content_html:
            payload["contentHtml"] = self.content_html
        if self.image_url:
            payload["imageUrl"] = self.image_url
        payload.update(
            {
                "category": self.category,
                "publishedAt": self.published_at.isoformat(),
                "langOriginal": self.lang_original,
                "langTranslated": self.lang_translated,
            }
        )
        return payload


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a best-effort step.

    Either value is populated (success) or error is populated (failure).
    Callers substitute their own fallback via value_or().
    """
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, reason: str) -> "Result[T]":
        return cls(value=None, error=reason)

    def value_or(self, fallback: T) -> T:
        if self.ok and self.value is not None:
            return self.value
        return fallback
