"""
Command-line interface for the feed aggregator.

Uses Typer to provide a CLI with options for the main configuration
settings. Supports loading .env files for translation API keys.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from .config import load_config
from .runner import run_pipeline

try:
    from dotenv import load_dotenv
except Exception:  # noqa: BLE001
    load_dotenv = None

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Aggregate news feeds into a JSON snapshot."""


@app.command()
def run(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    output: Path | None = typer.Option(None, "--output", "-o", help="Snapshot path."),
    provider: str | None = typer.Option(
        None,
        "--provider",
        envvar="TRANSLATE_PROVIDER",
        help="Translation provider: none, deepl, google or libretranslate.",
    ),
    target_lang: str | None = typer.Option(
        None, "--target-lang", envvar="NEWSFA_DEFAULT_LANG", help="Target language code."
    ),
    libretranslate_url: str | None = typer.Option(
        None,
        "--libretranslate-url",
        envvar="LIBRETRANSLATE_URL",
        help="Base URL of a self-hosted LibreTranslate instance.",
    ),
    live_images: bool | None = typer.Option(
        None, "--live-images/--no-live-images", help="Scrape article pages for og:image."
    ),
    include_html: bool | None = typer.Option(
        None, "--include-html/--no-include-html", help="Emit raw embedded HTML as contentHtml."
    ),
    localize_sources: bool | None = typer.Option(
        None, "--localize-sources/--no-localize-sources", help="Use localized source names."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
):
    """Fetch all sources once and write the articles snapshot.

    Args:
        config: Optional path to YAML config file
        output: Snapshot path (defaults to public/articles.json)
        provider: Translation provider name
        target_lang: Target language for translated fields
        libretranslate_url: Self-hosted translation service URL
        live_images: Enable/disable the live page image fallback
        include_html: Enable/disable contentHtml in the snapshot
        localize_sources: Enable/disable localized source names
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        progress: Whether to show a progress bar
    """
    # Load environment variables from .env if available
    if load_dotenv is not None:
        load_dotenv()

    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if provider:
        cfg.translate.provider = provider
    if target_lang:
        cfg.translate.target_lang = target_lang
    if libretranslate_url:
        cfg.translate.libretranslate_url = libretranslate_url
    if live_images is not None:
        cfg.images.live_page_fallback = live_images
    if include_html is not None:
        cfg.output.include_content_html = include_html
    if localize_sources is not None:
        cfg.output.localize_source_names = localize_sources
    if log_level:
        cfg.logging.level = log_level

    result = run_pipeline(cfg, output_path=output, show_progress=progress, console=console)
    console.print(f"Wrote {result.stats.written} articles to {result.output_path}", soft_wrap=True)


if __name__ == "__main__":
    app()
