from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import httpx
import pytest

from newsfa_feed.core.types import Article

SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:content="http://purl.org/rss/1.0/modules/content/"
     xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Example Feed</title>
    <link>https://example.com/</link>
    <description>Example</description>
    <item>
      <title>First story</title>
      <link>https://example.com/1</link>
      <description>&lt;p&gt;Short &lt;b&gt;teaser&lt;/b&gt;&lt;/p&gt;</description>
      <content:encoded><![CDATA[<p>Body text <img src="https://example.com/img/1.jpg"></p>]]></content:encoded>
      <pubDate>Tue, 02 Jan 2024 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Second story</title>
      <link>https://example.com/2</link>
      <enclosure url="https://cdn.example.com/2.jpg" type="image/jpeg" length="0"/>
      <media:thumbnail url="https://cdn.example.com/2-thumb.jpg"/>
      <pubDate>Wed, 03 Jan 2024 08:30:00 GMT</pubDate>
    </item>
    <item>
      <link>https://example.com/3</link>
      <description>No title here</description>
    </item>
  </channel>
</rss>
"""


def _make_article(
    url: str,
    title: str = "Title",
    published_at: datetime | None = None,
    source: str = "Source",
    image_url: str | None = None,
) -> Article:
    return Article(
        id=f"{source}:{url}",
        url=url,
        source=source,
        title=title,
        title_translated=title,
        summary="",
        summary_translated="",
        content_html="",
        image_url=image_url,
        category="general",
        published_at=published_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
        lang_original="und",
        lang_translated="fa",
    )


@pytest.fixture
def sample_rss() -> bytes:
    return SAMPLE_RSS


@pytest.fixture
def make_article() -> Callable[..., Article]:
    return _make_article


@pytest.fixture
def mock_client():
    clients: list[httpx.Client] = []

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
        clients.append(client)
        return client

    yield _build
    for client in clients:
        client.close()
