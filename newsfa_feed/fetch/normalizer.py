"""
Entry normalization: feedparser entries to Article records.

raw_entry_from_feedparser() flattens the parts of a feedparser entry the
pipeline uses into a RawEntry. normalize_entry() turns a RawEntry into an
Article by running the summary cleaner, image resolver, classifier,
language detector and translator over it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from typing import Any, Callable

from dateutil import parser as date_parser

from ..core.classifier import classify
from ..core.language import detect_language
from ..core.summary import MAX_SUMMARY_CHARS, clean_summary
from ..core.types import Article, RawEntry
from ..translate.base import Translator

ID_MAX_CHARS = 190

logger = logging.getLogger(__name__)


@dataclass
class NormalizeContext:
    """Per-run collaborators and settings used while normalizing entries.

    Attributes:
        translator: Translation provider selected for the run
        target_lang: Target language code for translated fields
        resolve_image: Callable returning an image URL (or None) for an entry
        fetched_at: Fallback publish time for entries without a date
        summary_max_chars: Truncation length for cleaned summaries
    """
    translator: Translator
    target_lang: str
    resolve_image: Callable[[RawEntry], str | None]
    fetched_at: datetime
    summary_max_chars: int = MAX_SUMMARY_CHARS


def raw_entry_from_feedparser(entry: Any) -> RawEntry:
    """Extract the fields used downstream from a feedparser entry."""
    summary = _text(entry.get("summary"))
    summary_type = (entry.get("summary_detail") or {}).get("type", "")

    content_plain = None
    content_html = None
    for item in entry.get("content") or []:
        value = _text(item.get("value"))
        if not value:
            continue
        if "html" in (item.get("type") or ""):
            content_html = content_html or value
        else:
            content_plain = content_plain or value

    return RawEntry(
        link=_text(entry.get("link")),
        title=_text(entry.get("title")),
        iso_date=_entry_datetime(entry),
        content_snippet=summary if summary_type == "text/plain" else None,
        summary=summary,
        content=content_plain,
        content_encoded=content_html,
        enclosure_url=_enclosure_url(entry),
        media_url=_media_url(entry),
    )


def pick_summary_source(raw: RawEntry) -> str:
    """Return the first non-empty summary-bearing field of an entry."""
    for value in (raw.content_snippet, raw.summary, raw.content, raw.content_encoded):
        if value:
            return value
    return ""


def make_article_id(source_name: str, url: str) -> str:
    return f"{source_name}:{url}"[:ID_MAX_CHARS]


def normalize_entry(
    raw: RawEntry,
    source_name: str,
    display_name: str,
    ctx: NormalizeContext,
) -> Article | None:
    """Build an Article from a raw entry.

    Args:
        raw: The entry as extracted from the feed
        source_name: Configured source name, used in the article id
        display_name: Name written to the article's source field
        ctx: Run-wide collaborators and settings

    Returns:
        The Article, or None when the entry lacks a link or a title
    """
    if not raw.link or not raw.title:
        return None

    url = raw.link
    title = raw.title
    summary = clean_summary(pick_summary_source(raw), ctx.summary_max_chars)
    image_url = ctx.resolve_image(raw)

    category = classify(f"{title} {summary}")
    lang = detect_language(f"{title}\n{summary}")

    title_translated = ctx.translator.translate(title, ctx.target_lang)
    summary_translated = ctx.translator.translate(summary, ctx.target_lang) if summary else ""

    return Article(
        id=make_article_id(source_name, url),
        url=url,
        source=display_name,
        title=title,
        title_translated=title_translated,
        summary=summary,
        summary_translated=summary_translated,
        content_html=raw.content_encoded or raw.content or "",
        image_url=image_url,
        category=category,
        published_at=raw.iso_date or ctx.fetched_at,
        lang_original=lang,
        lang_translated=ctx.target_lang,
    )


def _text(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _entry_datetime(entry: Any) -> datetime | None:
    for key in ("published_parsed", "updated_parsed"):
        parsed = entry.get(key)
        if parsed:
            return datetime(*parsed[:6], tzinfo=timezone.utc)
    for key in ("published", "updated"):
        value = entry.get(key)
        if value:
            parsed_dt = _parse_datetime(value)
            if parsed_dt is not None:
                return parsed_dt
    return None


def _parse_datetime(value: str) -> datetime | None:
    try:
        parsed = date_parser.parse(value)
    except (ValueError, TypeError, OverflowError):
        logger.debug("Unparseable entry date: %s", value)
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _enclosure_url(entry: Any) -> str | None:
    for enclosure in entry.get("enclosures") or []:
        url = _text(enclosure.get("href") or enclosure.get("url"))
        if url:
            return url
    return None


def _media_url(entry: Any) -> str | None:
    for key in ("media_content", "media_thumbnail"):
        for media in entry.get(key) or []:
            url = _text(media.get("url"))
            if url:
                return url
    return None
