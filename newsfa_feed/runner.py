"""
Main pipeline orchestration for the feed aggregator.

This module coordinates the entire run:
1. Fetch and parse each configured source, in order
2. Normalize each entry (summary, image, category, language, translation)
3. Deduplicate by URL and sort newest first
4. Write the JSON snapshot

Sources and entries are processed one at a time. A source that cannot be
fetched or parsed is logged and skipped; it never aborts the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

import httpx
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from .config import AppConfig
from .core.dedup import dedup_and_sort
from .core.types import Article, Source
from .fetch.fetcher import FeedResult, build_client, fetch_feed
from .fetch.images import ImageResolver
from .fetch.normalizer import NormalizeContext, normalize_entry
from .output.snapshot import write_snapshot
from .sources import display_name
from .translate.factory import create_translator
from .utils.logging import log_event, setup_logging


@dataclass
class RunStats:
    """Counters collected during a run.

    Attributes:
        sources_ok: Sources fetched and parsed successfully
        sources_failed: Sources skipped because of a fetch/parse error
        entries_seen: Raw entries read from all feeds
        entries_dropped: Entries skipped for a missing link or title
        duplicates: Articles removed by URL dedup
        written: Articles in the snapshot
    """
    sources_ok: int = 0
    sources_failed: int = 0
    entries_seen: int = 0
    entries_dropped: int = 0
    duplicates: int = 0
    written: int = 0


@dataclass
class RunResult:
    output_path: Path
    articles: list[Article] = field(default_factory=list)
    stats: RunStats = field(default_factory=RunStats)


def run_pipeline(
    cfg: AppConfig,
    output_path: Path | None = None,
    show_progress: bool = False,
    console: Console | None = None,
    client: httpx.Client | None = None,
) -> RunResult:
    """Run one complete aggregation pass and write the snapshot.

    Args:
        cfg: Application configuration
        output_path: Snapshot path; defaults to cfg.output.path
        show_progress: Whether to display a per-source progress bar
        console: Rich console for the progress bar (creates default if None)
        client: Optional HTTP client; one is created and closed otherwise

    Returns:
        RunResult with the written path, the articles and run statistics
    """
    output_path = output_path or Path(cfg.output.path)
    logger = setup_logging(cfg.logging)
    stats = RunStats()

    own_client = client is None
    client = client or build_client(cfg.fetch)
    try:
        translator = create_translator(cfg.translate, client)
        ctx = NormalizeContext(
            translator=translator,
            target_lang=cfg.translate.target_lang,
            resolve_image=ImageResolver(cfg.images, cfg.fetch, client),
            fetched_at=datetime.now(timezone.utc),
            summary_max_chars=cfg.output.summary_max_chars,
        )
        log_event(
            logger,
            "Pipeline start",
            event="pipeline_start",
            sources=len(cfg.sources),
            provider=translator.name,
            target_lang=cfg.translate.target_lang,
        )

        if show_progress:
            progress = Progress(
                SpinnerColumn(),
                TextColumn("{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console or Console(),
            )
            with progress:
                task = progress.add_task("Sources", total=len(cfg.sources))
                collected = []
                for source in cfg.sources:
                    progress.update(task, description=source.name)
                    collected.extend(_process_source(source, cfg, ctx, client, stats, logger))
                    progress.advance(task, 1)
        else:
            collected = []
            for source in cfg.sources:
                collected.extend(_process_source(source, cfg, ctx, client, stats, logger))
    finally:
        if own_client:
            client.close()

    articles = dedup_and_sort(collected)
    stats.duplicates = len(collected) - len(articles)
    stats.written = len(articles)

    write_snapshot(articles, output_path, cfg.output.include_content_html)
    log_event(
        logger,
        f"Wrote {output_path} with {len(articles)} items",
        event="pipeline_complete",
        output=str(output_path),
        total=len(articles),
        sources_ok=stats.sources_ok,
        sources_failed=stats.sources_failed,
        duplicates=stats.duplicates,
    )
    return RunResult(output_path=output_path, articles=articles, stats=stats)


def _process_source(
    source: Source,
    cfg: AppConfig,
    ctx: NormalizeContext,
    client: httpx.Client,
    stats: RunStats,
    logger: logging.Logger,
) -> list[Article]:
    """Fetch one source and normalize its entries in feed order."""
    if source.type != "rss":
        log_event(
            logger,
            f"Skipping {source.name}: unsupported source type {source.type!r}",
            level=logging.WARNING,
            event="source_skipped",
            source=source.name,
        )
        return []

    try:
        result = fetch_feed(source, cfg.fetch, client)
    except Exception as exc:  # noqa: BLE001
        result = FeedResult(source=source, error=f"{type(exc).__name__}: {exc}")
    if not result.ok:
        stats.sources_failed += 1
        log_event(
            logger,
            f"Fetch error for {source.name}: {result.error}",
            level=logging.ERROR,
            event="fetch_failed",
            source=source.name,
            url=source.url,
            error=result.error,
        )
        return []

    stats.sources_ok += 1
    name = display_name(source, cfg.output.localize_source_names)
    articles: list[Article] = []
    for raw in result.entries:
        stats.entries_seen += 1
        article = normalize_entry(raw, source.name, name, ctx)
        if article is None:
            stats.entries_dropped += 1
            continue
        articles.append(article)

    log_event(
        logger,
        f"Fetched {source.name}: {len(articles)} articles",
        level=logging.DEBUG,
        event="source_done",
        source=source.name,
        entries=len(result.entries),
        articles=len(articles),
    )
    return articles
