"""
newsfa-feed - news feed aggregator.

This package polls a list of news RSS/Atom feeds, normalizes and classifies
every entry, optionally translates title and summary, resolves an image,
and writes a single JSON snapshot for a front end to render.

Main entry point is the CLI via the `newsfa-feed run` command.

Example:
    $ newsfa-feed run --provider deepl --target-lang fa -o public/articles.json
"""

__all__ = ["__version__", "run_pipeline", "load_config", "AppConfig", "Article"]
__version__ = "0.1.0"

from .config import AppConfig, load_config
from .core.types import Article
from .runner import run_pipeline
