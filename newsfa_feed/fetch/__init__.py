"""
Feed fetching, entry normalization and image resolution.

This package handles every step of the pipeline that touches the network
or the raw feed structures.
"""

from .fetcher import FeedResult, FetchResult, build_client, fetch_feed, fetch_url
from .images import ImageResolver, absolutize
from .normalizer import NormalizeContext, normalize_entry, raw_entry_from_feedparser

__all__ = [
    "FeedResult",
    "FetchResult",
    "build_client",
    "fetch_feed",
    "fetch_url",
    "ImageResolver",
    "absolutize",
    "NormalizeContext",
    "normalize_entry",
    "raw_entry_from_feedparser",
]
