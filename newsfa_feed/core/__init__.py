"""
Core domain models and business logic.

This package contains data types and the pure transformation steps
(classification, language detection, summary cleaning, dedup) that are
independent of any network access.
"""

from .types import Article, RawEntry, Result, Source
from .classifier import CATEGORIES, classify
from .dedup import dedup_and_sort, dedup_articles, sort_articles
from .language import detect_language
from .summary import clean_summary

__all__ = [
    "Article",
    "RawEntry",
    "Result",
    "Source",
    "CATEGORIES",
    "classify",
    "dedup_articles",
    "sort_articles",
    "dedup_and_sort",
    "detect_language",
    "clean_summary",
]
