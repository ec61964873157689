"""Default feed list and localized display names."""

from __future__ import annotations

from .core.types import Source


DEFAULT_SOURCES: tuple[Source, ...] = (
    Source("The New York Times — Home", "https://rss.nytimes.com/services/xml/rss/nyt/HomePage.xml"),
    Source("The Washington Post — Home", "https://feeds.washingtonpost.com/rss/homepage/"),
    Source("The Guardian — World", "https://www.theguardian.com/world/rss"),
    Source("Financial Times — News Feed", "https://www.ft.com/news-feed?format=rss"),
    Source("BBC News — Front Page", "https://feeds.bbci.co.uk/news/rss.xml?edition=int"),
    Source("CNN International — Top", "https://rss.cnn.com/rss/edition.rss"),
    Source("Al Jazeera English — All", "https://www.aljazeera.com/xml/rss/all.xml"),
    Source("DW (Deutsche Welle) — English", "https://rss.dw.com/rdf/rss-en-all"),
    Source("Reuters — Top News", "https://feeds.reuters.com/reuters/topNews"),
    Source("Bloomberg — Markets", "https://feeds.bloomberg.com/markets/news.rss"),
    Source("Bloomberg — Business", "https://feeds.bloomberg.com/business/news.rss"),
    Source("Nature — Main", "https://www.nature.com/nature.rss"),
    Source("TechCrunch — All", "https://techcrunch.com/feed/"),
    Source("MIT Technology Review — All", "https://www.technologyreview.com/feed/"),
    Source("The Lancet — Current Issue", "https://thelancet.com/rssfeed/lancet_current.xml"),
)

LOCALIZED_NAMES: dict[str, str] = {
    "The New York Times — Home": "نیویورک تایمز",
    "The Washington Post — Home": "واشنگتن پست",
    "The Guardian — World": "گاردین — جهان",
    "Financial Times — News Feed": "فایننشال تایمز",
    "BBC News — Front Page": "بی‌بی‌سی",
    "CNN International — Top": "سی‌ان‌ان بین‌الملل",
    "Al Jazeera English — All": "الجزیره انگلیسی",
    "DW (Deutsche Welle) — English": "دویچه وله",
    "Reuters — Top News": "رویترز",
    "Bloomberg — Markets": "بلومبرگ — بازارها",
    "Bloomberg — Business": "بلومبرگ — کسب‌وکار",
    "Nature — Main": "نیچر",
    "TechCrunch — All": "تک‌کرانچ",
    "MIT Technology Review — All": "ام‌آی‌تی تکنولوژی ریویو",
    "The Lancet — Current Issue": "لنست",
}


def display_name(source: Source, localize: bool) -> str:
    """Return the name shown in the snapshot for a source.

    Sources without a localized entry keep their configured name.
    """
    if localize:
        return LOCALIZED_NAMES.get(source.name, source.name)
    return source.name
