"""
JSON snapshot output.

The snapshot is the only artifact of a run: a pretty-printed JSON array of
articles that fully replaces the previous file at the same path.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..core.types import Article


def write_snapshot(
    articles: list[Article],
    output_path: Path,
    include_content_html: bool = True,
) -> Path:
    """Write articles as an indented UTF-8 JSON array.

    Parent directories are created as needed and any existing file is
    overwritten.

    Args:
        articles: Articles in their final order
        output_path: Destination file
        include_content_html: Whether to emit each article's contentHtml

    Returns:
        The path written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [article.to_dict(include_content_html=include_content_html) for article in articles]
    output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return output_path
