"""Pluggable translation providers."""

from .base import Translator
from .factory import available_providers, create_translator
from .providers import DeepLTranslator, GoogleTranslator, LibreTranslateTranslator, NoopTranslator

__all__ = [
    "Translator",
    "NoopTranslator",
    "DeepLTranslator",
    "GoogleTranslator",
    "LibreTranslateTranslator",
    "create_translator",
    "available_providers",
]
