"""Tests for translation providers and the provider factory."""

from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx
import pytest

from newsfa_feed.config import TranslateConfig, get_api_key
from newsfa_feed.translate.factory import available_providers, create_translator
from newsfa_feed.translate.providers import (
    DeepLTranslator,
    GoogleTranslator,
    LibreTranslateTranslator,
    NoopTranslator,
)


class _Recorder:
    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.requests: list[httpx.Request] = []
        self.response = response
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def _clear_keys(monkeypatch):
    for name in ("DEEPL_API_KEY", "GOOGLE_KEY", "LIBRETRANSLATE_API_KEY"):
        monkeypatch.delenv(name, raising=False)


def test_available_providers_contains_expected_backends():
    names = available_providers()
    for name in ("none", "deepl", "google", "libretranslate"):
        assert name in names


@pytest.mark.parametrize(
    "name,expected",
    [
        ("none", NoopTranslator),
        ("deepl", DeepLTranslator),
        ("Google", GoogleTranslator),
        ("libretranslate", LibreTranslateTranslator),
        ("self-hosted", LibreTranslateTranslator),
    ],
)
def test_create_translator(name, expected):
    assert isinstance(create_translator(TranslateConfig(provider=name)), expected)


def test_create_translator_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unsupported translation provider"):
        create_translator(TranslateConfig(provider="babelfish"))


def test_get_api_key_prefers_inline_then_env(monkeypatch):
    monkeypatch.setenv("DEEPL_API_KEY", "env-key")
    assert get_api_key(TranslateConfig(provider="deepl")) == "env-key"
    assert get_api_key(TranslateConfig(provider="deepl", api_key="inline")) == "inline"
    assert get_api_key(TranslateConfig(provider="none")) is None


def test_noop_returns_input():
    assert NoopTranslator().translate("Hello", "fa") == "Hello"


def test_deepl_request_and_response(mock_client):
    recorder = _Recorder(httpx.Response(200, json={"translations": [{"text": "سلام"}]}))
    translator = DeepLTranslator(TranslateConfig(provider="deepl"), "k-123", mock_client(recorder))

    assert translator.translate("Hello", "fa") == "سلام"

    request = recorder.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api-free.deepl.com/v2/translate"
    form = parse_qs(request.content.decode())
    assert form == {"auth_key": ["k-123"], "text": ["Hello"], "target_lang": ["FA"]}


def test_google_request_and_response(mock_client):
    payload = {"data": {"translations": [{"translatedText": "سلام"}]}}
    recorder = _Recorder(httpx.Response(200, json=payload))
    translator = GoogleTranslator(TranslateConfig(provider="google"), "g-key", mock_client(recorder))

    assert translator.translate("Hello", "fa") == "سلام"

    request = recorder.requests[0]
    assert request.url.params["key"] == "g-key"
    assert json.loads(request.content) == {"q": "Hello", "target": "fa"}


def test_libretranslate_request_and_response(mock_client):
    recorder = _Recorder(httpx.Response(200, json={"translatedText": "سلام"}))
    cfg = TranslateConfig(provider="libretranslate", libretranslate_url="http://mt.local:5000/")
    translator = LibreTranslateTranslator(cfg, None, mock_client(recorder))

    assert translator.translate("Hello", "fa") == "سلام"

    request = recorder.requests[0]
    assert str(request.url) == "http://mt.local:5000/translate"
    assert json.loads(request.content) == {
        "q": "Hello",
        "source": "auto",
        "target": "fa",
        "format": "text",
    }


def test_libretranslate_sends_optional_key(mock_client):
    recorder = _Recorder(httpx.Response(200, json={"translatedText": "x"}))
    translator = LibreTranslateTranslator(TranslateConfig(), "lt-key", mock_client(recorder))
    translator.translate("Hello", "fa")
    assert json.loads(recorder.requests[0].content)["api_key"] == "lt-key"


@pytest.mark.parametrize("cls", [DeepLTranslator, GoogleTranslator, LibreTranslateTranslator])
def test_empty_input_makes_no_request(cls, mock_client):
    recorder = _Recorder(httpx.Response(200, json={}))
    translator = cls(TranslateConfig(), "key", mock_client(recorder))
    assert translator.translate("", "fa") == ""
    assert recorder.requests == []


@pytest.mark.parametrize("cls", [DeepLTranslator, GoogleTranslator])
def test_missing_credential_is_pass_through(cls, mock_client):
    recorder = _Recorder(httpx.Response(200, json={}))
    translator = cls(TranslateConfig(), None, mock_client(recorder))
    assert translator.translate("Hello", "fa") == "Hello"
    assert recorder.requests == []


@pytest.mark.parametrize(
    "recorder",
    [
        _Recorder(httpx.Response(500, text="boom")),
        _Recorder(httpx.Response(200, text="not json")),
        _Recorder(httpx.Response(200, json={"unexpected": True})),
        _Recorder(httpx.Response(200, json={"translations": []})),
        _Recorder(httpx.Response(200, json={"translations": [{"text": ""}]})),
        _Recorder(error=httpx.ConnectError("refused")),
    ],
)
def test_failures_return_original_text(recorder, mock_client):
    translator = DeepLTranslator(TranslateConfig(), "key", mock_client(recorder))
    assert translator.translate("Hello", "fa") == "Hello"
    assert len(recorder.requests) == 1
