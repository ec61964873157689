"""
Concrete translation providers.

- NoopTranslator: pass-through
- DeepLTranslator: form-encoded POST, reads translations[0].text
- GoogleTranslator: JSON POST to Translate v2, reads data.translations[0].translatedText
- LibreTranslateTranslator: JSON POST to a self-hosted instance, reads translatedText

Providers with a missing credential are constructed anyway and behave as
pass-through, so a run never fails for lack of a key.
"""

from __future__ import annotations

import httpx

from ..config import TranslateConfig
from ..core.types import Result
from .base import non_empty, post_json, translate_or_original


class NoopTranslator:
    name = "none"

    def __init__(self, cfg: TranslateConfig | None = None, api_key: str | None = None,
                 client: httpx.Client | None = None):
        self.cfg = cfg

    def translate(self, text: str, target_lang: str) -> str:
        return text


class DeepLTranslator:
    """DeepL REST API (v2), authenticated with an auth_key form field."""

    name = "deepl"

    def __init__(self, cfg: TranslateConfig, api_key: str | None, client: httpx.Client | None = None):
        self.cfg = cfg
        self.api_key = api_key
        self.client = client

    def translate(self, text: str, target_lang: str) -> str:
        if not text or not self.api_key:
            return text
        return translate_or_original(self.name, text, lambda: self._request(text, target_lang))

    def _request(self, text: str, target_lang: str) -> Result[str]:
        data = post_json(
            self.client,
            f"{self.cfg.deepl_url.rstrip('/')}/v2/translate",
            data={"auth_key": self.api_key, "text": text, "target_lang": target_lang.upper()},
        )
        return non_empty(data["translations"][0]["text"])


class GoogleTranslator:
    """Google Cloud Translation v2, authenticated with a key query parameter."""

    name = "google"

    def __init__(self, cfg: TranslateConfig, api_key: str | None, client: httpx.Client | None = None):
        self.cfg = cfg
        self.api_key = api_key
        self.client = client

    def translate(self, text: str, target_lang: str) -> str:
        if not text or not self.api_key:
            return text
        return translate_or_original(self.name, text, lambda: self._request(text, target_lang))

    def _request(self, text: str, target_lang: str) -> Result[str]:
        data = post_json(
            self.client,
            self.cfg.google_url,
            params={"key": self.api_key},
            json={"q": text, "target": target_lang},
        )
        return non_empty(data["data"]["translations"][0]["translatedText"])


class LibreTranslateTranslator:
    """Self-hosted LibreTranslate; the API key is optional."""

    name = "libretranslate"

    def __init__(self, cfg: TranslateConfig, api_key: str | None, client: httpx.Client | None = None):
        self.cfg = cfg
        self.api_key = api_key
        self.client = client

    def translate(self, text: str, target_lang: str) -> str:
        if not text or not self.cfg.libretranslate_url:
            return text
        return translate_or_original(self.name, text, lambda: self._request(text, target_lang))

    def _request(self, text: str, target_lang: str) -> Result[str]:
        payload = {"q": text, "source": "auto", "target": target_lang, "format": "text"}
        if self.api_key:
            payload["api_key"] = self.api_key
        data = post_json(
            self.client,
            f"{self.cfg.libretranslate_url.rstrip('/')}/translate",
            json=payload,
        )
        return non_empty(data["translatedText"])
