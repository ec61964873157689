"""Provider factory and registry for swappable translation backends."""

from __future__ import annotations

import httpx

from ..config import TranslateConfig, get_api_key
from .base import Translator
from .providers import DeepLTranslator, GoogleTranslator, LibreTranslateTranslator, NoopTranslator


_PROVIDER_REGISTRY: dict[str, type] = {
    "none": NoopTranslator,
    "deepl": DeepLTranslator,
    "google": GoogleTranslator,
    "libretranslate": LibreTranslateTranslator,
    "libre": LibreTranslateTranslator,
    "self-hosted": LibreTranslateTranslator,
}


def available_providers() -> list[str]:
    """Return the set of registered provider names."""
    return sorted(_PROVIDER_REGISTRY.keys())


def create_translator(cfg: TranslateConfig, client: httpx.Client | None = None) -> Translator:
    """Build a translator instance from runtime config."""
    name = (cfg.provider or "none").lower().strip()
    builder = _PROVIDER_REGISTRY.get(name)
    if builder is None:
        supported = ", ".join(available_providers())
        raise ValueError(f"Unsupported translation provider: {cfg.provider}. Supported: {supported}")
    return builder(cfg, get_api_key(cfg), client)
