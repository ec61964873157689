"""Tests for feed fetching, raw entry extraction and normalization."""

from __future__ import annotations

from datetime import datetime, timezone

import feedparser
import httpx

from newsfa_feed.config import FetchConfig
from newsfa_feed.core.types import RawEntry, Source
from newsfa_feed.fetch import fetcher
from newsfa_feed.fetch.fetcher import fetch_feed, fetch_url
from newsfa_feed.fetch.normalizer import (
    NormalizeContext,
    make_article_id,
    normalize_entry,
    pick_summary_source,
    raw_entry_from_feedparser,
)
from newsfa_feed.translate.providers import NoopTranslator

SOURCE = Source("Example", "https://example.com/feed.xml")
FETCHED_AT = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _ctx(image: str | None = None, translator=None) -> NormalizeContext:
    return NormalizeContext(
        translator=translator or NoopTranslator(),
        target_lang="fa",
        resolve_image=lambda raw: image,
        fetched_at=FETCHED_AT,
    )


def test_fetch_url_reports_http_errors(mock_client):
    client = mock_client(lambda request: httpx.Response(503, text="unavailable"))
    result = fetch_url("https://example.com/x", FetchConfig(), client)
    assert not result.ok
    assert result.status_code == 503
    assert result.error == "HTTP 503"
    assert result.text is None


def test_fetch_url_reports_network_errors(mock_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = fetch_url("https://example.com/x", FetchConfig(), mock_client(handler))
    assert not result.ok
    assert result.status_code is None
    assert result.error.startswith("ConnectError")


def test_fetch_feed_parses_entries(mock_client, sample_rss):
    client = mock_client(lambda request: httpx.Response(200, content=sample_rss))
    result = fetch_feed(SOURCE, FetchConfig(), client)
    assert result.ok
    assert [e.link for e in result.entries] == [
        "https://example.com/1",
        "https://example.com/2",
        "https://example.com/3",
    ]


def test_fetch_feed_failure_carries_reason(mock_client):
    client = mock_client(lambda request: httpx.Response(404))
    result = fetch_feed(SOURCE, FetchConfig(), client)
    assert not result.ok
    assert result.entries == []
    assert "404" in result.error


def test_fetch_feed_rejects_malformed_document_without_entries(mock_client, monkeypatch):
    malformed = feedparser.FeedParserDict(bozo=1, bozo_exception=ValueError("not xml"), entries=[])
    monkeypatch.setattr(fetcher.feedparser, "parse", lambda content: malformed)
    client = mock_client(lambda request: httpx.Response(200, content=b"garbage"))
    result = fetch_feed(SOURCE, FetchConfig(), client)
    assert not result.ok
    assert result.error == "ValueError: not xml"


def test_raw_entry_from_feedparser_maps_fields(sample_rss):
    parsed = feedparser.parse(sample_rss)
    first, second, third = [raw_entry_from_feedparser(e) for e in parsed.entries]

    assert first.title == "First story"
    assert first.iso_date == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)
    assert "teaser" in first.summary
    assert first.content_snippet is None
    assert "img" in first.content_encoded
    assert first.enclosure_url is None

    assert second.enclosure_url == "https://cdn.example.com/2.jpg"
    assert second.media_url == "https://cdn.example.com/2-thumb.jpg"
    assert second.iso_date == datetime(2024, 1, 3, 8, 30, tzinfo=timezone.utc)

    assert third.title is None
    assert third.iso_date is None


def test_raw_entry_date_string_fallback():
    entry = feedparser.FeedParserDict(link="https://x/1", title="t", published="2024-02-03T04:05:06+02:00")
    raw = raw_entry_from_feedparser(entry)
    assert raw.iso_date == datetime(2024, 2, 3, 2, 5, 6, tzinfo=timezone.utc)


def test_raw_entry_takes_first_enclosure_whatever_its_type():
    entry = feedparser.FeedParserDict(
        link="https://x/1",
        title="t",
        links=[
            {"rel": "alternate", "href": "https://x/1"},
            {"rel": "enclosure", "href": "https://x/a.mp3", "type": "audio/mpeg"},
            {"rel": "enclosure", "href": "https://x/a.png", "type": "image/png"},
        ],
    )
    assert raw_entry_from_feedparser(entry).enclosure_url == "https://x/a.mp3"


def test_pick_summary_source_order():
    raw = RawEntry(summary="", content="plain body", content_encoded="<p>html</p>")
    assert pick_summary_source(raw) == "plain body"
    raw = RawEntry(content_snippet="snippet", summary="summary")
    assert pick_summary_source(raw) == "snippet"
    raw = RawEntry(content_encoded="<p>only html</p>")
    assert pick_summary_source(raw) == "<p>only html</p>"
    assert pick_summary_source(RawEntry()) == ""


def test_normalize_entry_requires_link_and_title():
    assert normalize_entry(RawEntry(title="t"), "S", "S", _ctx()) is None
    assert normalize_entry(RawEntry(link="https://x/1"), "S", "S", _ctx()) is None


def test_normalize_entry_builds_article():
    raw = RawEntry(
        link="https://example.com/story",
        title="Apple reports record quarter",
        summary='<p>Sales of <a href="https://example.com/x">new devices</a> beat forecasts.</p>',
        content_encoded="<p>Full body</p>",
        iso_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
    )
    article = normalize_entry(raw, "Example Feed", "نمونه", _ctx(image="https://img/1.jpg"))

    assert article.id == "Example Feed:https://example.com/story"
    assert article.source == "نمونه"
    assert article.summary == "Sales of new devices beat forecasts."
    assert article.title_translated == article.title
    assert article.summary_translated == article.summary
    assert article.category == "tech"
    assert article.image_url == "https://img/1.jpg"
    assert article.content_html == "<p>Full body</p>"
    assert article.published_at == datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert article.lang_translated == "fa"


def test_normalize_entry_falls_back_to_fetch_time():
    article = normalize_entry(RawEntry(link="https://x/1", title="Hello"), "S", "S", _ctx())
    assert article.published_at == FETCHED_AT
    assert article.summary == ""
    assert article.summary_translated == ""
    assert article.lang_original == "und"


def test_normalize_entry_translates_title_and_summary():
    calls = []

    class Recorder:
        name = "recorder"

        def translate(self, text, target_lang):
            calls.append((text, target_lang))
            return f"[{target_lang}] {text}"

    raw = RawEntry(link="https://x/1", title="Hello", summary="World news today")
    article = normalize_entry(raw, "S", "S", _ctx(translator=Recorder()))
    assert article.title_translated == "[fa] Hello"
    assert article.summary_translated == "[fa] World news today"
    assert calls == [("Hello", "fa"), ("World news today", "fa")]


def test_article_id_is_truncated():
    url = "https://example.com/" + "a" * 300
    assert len(make_article_id("Source", url)) == 190
