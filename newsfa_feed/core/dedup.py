"""
Article deduplication and ordering.

Articles are keyed by URL; the first article seen for a URL is kept and
later ones are dropped, whichever source they come from. The survivors are
ordered newest first.
"""

from __future__ import annotations

from .types import Article


def dedup_articles(articles: list[Article]) -> list[Article]:
    """Remove articles whose URL was already seen, preserving order.

    Args:
        articles: Articles in processing order (source order, then feed order)

    Returns:
        One article per distinct URL, the first occurrence of each
    """
    kept: dict[str, Article] = {}
    for article in articles:
        if article.url not in kept:
            kept[article.url] = article
    return list(kept.values())


def sort_articles(articles: list[Article]) -> list[Article]:
    """Order articles by publish time, newest first.

    The sort is stable, so articles with equal timestamps keep their
    relative input order.
    """
    return sorted(articles, key=lambda a: a.published_at, reverse=True)


def dedup_and_sort(articles: list[Article]) -> list[Article]:
    return sort_articles(dedup_articles(articles))
