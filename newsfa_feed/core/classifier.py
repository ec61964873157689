"""
Keyword-based topic classification.

Rules are evaluated in order and the first matching pattern wins; text
matching no rule is "general". Each rule is a case-insensitive union of its
keywords, matched anywhere in the text, so "Scientists" counts as science and
"Presidential" as world.
"""

from __future__ import annotations

import re

DEFAULT_CATEGORY = "general"


def _rule(keywords: list[str]) -> re.Pattern[str]:
    return re.compile("|".join(map(re.escape, keywords)), re.IGNORECASE)


CATEGORY_RULES: list[tuple[str, re.Pattern[str]]] = [
    (
        "tech",
        _rule(["AI", "technology", "tech", "Apple", "Google", "Microsoft", "chip",
               "semiconductor", "startup", "استارتاپ", "تکنولوژی"]),
    ),
    (
        "business",
        _rule(["economy", "market", "stock", "IPO", "merger", "acquisition",
               "بازار", "سهام", "اقتصاد"]),
    ),
    (
        "sport",
        _rule(["league", "cup", "football", "tennis", "match", "goal", "ورزش", "فوتبال"]),
    ),
    (
        "science",
        _rule(["science", "research", "study", "journal", "دانش", "پژوهش", "علم"]),
    ),
    (
        "world",
        _rule(["president", "minister", "election", "diplomacy", "UN", "سازمان ملل",
               "انتخابات", "G7", "NATO"]),
    ),
]

CATEGORIES: tuple[str, ...] = tuple(name for name, _ in CATEGORY_RULES) + (DEFAULT_CATEGORY,)


def classify(text: str) -> str:
    """Return the first category whose pattern matches text."""
    for category, pattern in CATEGORY_RULES:
        if pattern.search(text or ""):
            return category
    return DEFAULT_CATEGORY
