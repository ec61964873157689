"""
Representative image resolution.

Strategies, tried in order until one yields a URL:
1. the entry's enclosure
2. media:content / media:thumbnail
3. the first <img src> inside the entry's embedded HTML
4. og:image / twitter:image of the live article page (optional)

Every strategy is best-effort; a failure falls through to the next one and
the final fallback is "no image".
"""

from __future__ import annotations

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup
import httpx

from ..config import FetchConfig, ImageConfig
from ..core.types import RawEntry, Result
from .fetcher import fetch_url

logger = logging.getLogger(__name__)


def absolutize(href: str, base: str | None) -> str:
    """Resolve href against base, returning href unchanged if either is malformed."""
    if not base:
        return href
    try:
        return urljoin(base, href)
    except ValueError:
        return href


def first_img_src(html: str, base: str | None) -> str | None:
    """Return the absolute URL of the first <img src> in html."""
    soup = BeautifulSoup(html, "html.parser")
    img = soup.find("img", src=True)
    if img is None:
        return None
    src = str(img.get("src") or "").strip()
    if not src:
        return None
    return absolutize(src, base)


def page_social_image(html: str, base: str | None) -> str | None:
    """Return the og:image (or twitter:image) URL declared by a page."""
    soup = BeautifulSoup(html, "html.parser")
    selectors = (
        'meta[property="og:image"]',
        'meta[name="twitter:image"]',
        'meta[property="twitter:image"]',
    )
    for selector in selectors:
        tag = soup.select_one(selector)
        if tag is None:
            continue
        content = str(tag.get("content") or "").strip()
        if content:
            return absolutize(content, base)
    return None


class ImageResolver:
    """Resolves an image URL for feed entries.

    Attributes:
        cfg: Image settings (live page fallback toggle)
        fetch_cfg: Fetch settings for the live page request
        client: Shared HTTP client for the run
    """

    def __init__(
        self,
        cfg: ImageConfig,
        fetch_cfg: FetchConfig,
        client: httpx.Client | None = None,
    ):
        self.cfg = cfg
        self.fetch_cfg = fetch_cfg
        self.client = client

    def __call__(self, raw: RawEntry) -> str | None:
        return self.resolve(raw)

    def resolve(self, raw: RawEntry) -> str | None:
        if raw.enclosure_url:
            return raw.enclosure_url
        if raw.media_url:
            return raw.media_url

        embedded = self._from_embedded_html(raw)
        if embedded.ok:
            return embedded.value
        logger.debug("No embedded image for %s: %s", raw.link, embedded.error)

        if not self.cfg.live_page_fallback or not raw.link:
            return None
        live = self._from_live_page(raw.link)
        if live.ok:
            return live.value
        logger.debug("No page image for %s: %s", raw.link, live.error)
        return None

    def _from_embedded_html(self, raw: RawEntry) -> Result[str]:
        html = raw.content_encoded or raw.content
        if not html:
            return Result.failure("no embedded html")
        try:
            src = first_img_src(html, raw.link)
        except Exception as exc:  # noqa: BLE001
            return Result.failure(f"{type(exc).__name__}: {exc}")
        if not src:
            return Result.failure("no <img> in embedded html")
        return Result.success(src)

    def _from_live_page(self, url: str) -> Result[str]:
        page = fetch_url(url, self.fetch_cfg, self.client)
        if not page.ok or not page.text:
            return Result.failure(page.error or "empty page")
        try:
            image = page_social_image(page.text, page.url)
        except Exception as exc:  # noqa: BLE001
            return Result.failure(f"{type(exc).__name__}: {exc}")
        if not image:
            return Result.failure("no og:image or twitter:image")
        return Result.success(image)
