"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching settings
- TranslateConfig: Translation provider selection and credentials
- ImageConfig: Image resolution behaviour
- OutputConfig: Snapshot path and field toggles
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container (plus the source list)
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml

from .core.types import Source
from .sources import DEFAULT_SOURCES


@dataclass
class FetchConfig:
    """Configuration for HTTP fetching (feeds, article pages).

    Attributes:
        timeout_seconds: HTTP request timeout
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    timeout_seconds: float = 20.0
    trust_env: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )


@dataclass
class TranslateConfig:
    """Configuration for the translation provider.

    Attributes:
        provider: "none", "deepl", "google" or "libretranslate"
        target_lang: Target language code for translated fields
        api_key: Optional inline API key (overrides env var)
        deepl_api_key_env: Environment variable holding the DeepL key
        deepl_url: DeepL API base URL (free or pro endpoint)
        google_api_key_env: Environment variable holding the Google key
        google_url: Google Translate v2 endpoint
        libretranslate_url: Base URL of a self-hosted LibreTranslate instance
        libretranslate_api_key_env: Environment variable holding an optional
            LibreTranslate key
    """

    provider: str = "none"
    target_lang: str = "fa"
    api_key: str | None = None
    deepl_api_key_env: str = "DEEPL_API_KEY"
    deepl_url: str = "https://api-free.deepl.com"
    google_api_key_env: str = "GOOGLE_KEY"
    google_url: str = "https://translation.googleapis.com/language/translate/v2"
    libretranslate_url: str = "http://localhost:5000"
    libretranslate_api_key_env: str = "LIBRETRANSLATE_API_KEY"


@dataclass
class ImageConfig:
    """Configuration for image resolution.

    Attributes:
        live_page_fallback: Fetch the article page for og:image/twitter:image
            when the feed carries no usable image
    """

    live_page_fallback: bool = True


@dataclass
class OutputConfig:
    """Configuration for the JSON snapshot.

    Attributes:
        path: Snapshot file path
        include_content_html: Emit the raw embedded HTML as contentHtml
        localize_source_names: Use localized display names for sources
        summary_max_chars: Truncation length for cleaned summaries
    """

    path: str = "public/articles.json"
    include_content_html: bool = True
    localize_source_names: bool = False
    summary_max_chars: int = 420


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Directory for the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "run.jsonl"
    directory: str = "logs"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    translate: TranslateConfig = field(default_factory=TranslateConfig)
    images: ImageConfig = field(default_factory=ImageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    sources: list[Source] = field(default_factory=lambda: list(DEFAULT_SOURCES))


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "fetch": {
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "trust_env": cfg.fetch.trust_env,
            "user_agent": cfg.fetch.user_agent,
        },
        "translate": {
            "provider": cfg.translate.provider,
            "target_lang": cfg.translate.target_lang,
            "api_key": cfg.translate.api_key,
            "deepl_api_key_env": cfg.translate.deepl_api_key_env,
            "deepl_url": cfg.translate.deepl_url,
            "google_api_key_env": cfg.translate.google_api_key_env,
            "google_url": cfg.translate.google_url,
            "libretranslate_url": cfg.translate.libretranslate_url,
            "libretranslate_api_key_env": cfg.translate.libretranslate_api_key_env,
        },
        "images": {
            "live_page_fallback": cfg.images.live_page_fallback,
        },
        "output": {
            "path": cfg.output.path,
            "include_content_html": cfg.output.include_content_html,
            "localize_source_names": cfg.output.localize_source_names,
            "summary_max_chars": cfg.output.summary_max_chars,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "directory": cfg.logging.directory,
        },
        "sources": [
            {"name": s.name, "url": s.url, "type": s.type} for s in cfg.sources
        ],
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        translate=TranslateConfig(**data["translate"]),
        images=ImageConfig(**data["images"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
        sources=[_source_from_raw(item) for item in data["sources"]],
    )


def _source_from_raw(item: dict[str, Any]) -> Source:
    if "name" not in item or "url" not in item:
        raise ValueError(f"Invalid source entry (needs name and url): {item!r}")
    return Source(name=str(item["name"]), url=str(item["url"]), type=str(item.get("type", "rss")))


def get_api_key(cfg: TranslateConfig) -> str | None:
    """Get the credential for the selected provider.

    The inline ``api_key`` wins; otherwise the provider's environment
    variable is read. Providers without a credential return None.
    """
    if cfg.api_key:
        return cfg.api_key
    env_name = {
        "deepl": cfg.deepl_api_key_env,
        "google": cfg.google_api_key_env,
        "libretranslate": cfg.libretranslate_api_key_env,
        "libre": cfg.libretranslate_api_key_env,
        "self-hosted": cfg.libretranslate_api_key_env,
    }.get(cfg.provider.lower().strip())
    if not env_name:
        return None
    return os.getenv(env_name) or None
