"""
Content envelopes handed to decoders.

A NewsForParse pairs raw text with where it came from and which shape it is
expected to have. The builders here wrap the file and network collaborators:
when those fail the envelope simply carries no content.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from ..config import NewsApiConfig, get_api_key
from ..fetch.fetcher import query_news_api
from ..logging_utils import Diagnostics


class NewsSource(Enum):
    FILE = "file"
    URL = "url"


class NewsFormat(Enum):
    FULL = "full"
    SIMPLE = "simple"


class NewsDecoder(Protocol):
    def decode(self, news: NewsForParse) -> bool:
        ...


@dataclass(frozen=True)
class NewsForParse:
    """Raw news content tagged with its origin and expected format.

    Attributes:
        source: Where the content came from
        format: Which envelope shape the producer expects
        content: Raw JSON text, or None if the collaborator failed
    """
    source: NewsSource
    format: NewsFormat
    content: str | None

    def dispatch(self, decoder: NewsDecoder) -> bool:
        """Hand this envelope to a decoder and report whether it decoded."""
        return decoder.decode(self)


def read_text_file(path: Path, diagnostics: Diagnostics) -> str | None:
    """Read a UTF-8 text file, returning None if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        diagnostics.error(f"Could not read {path}: {type(exc).__name__}: {exc}")
        return None


def news_from_file(path: Path, fmt: NewsFormat, diagnostics: Diagnostics) -> NewsForParse:
    return NewsForParse(NewsSource.FILE, fmt, read_text_file(path, diagnostics))


def news_from_api(params: str, cfg: NewsApiConfig, diagnostics: Diagnostics) -> NewsForParse:
    """Query NewsAPI and wrap the response body as a full-format envelope."""
    result = query_news_api(params, cfg, get_api_key(cfg))
    if result.error is not None:
        diagnostics.error(f"NewsAPI request to {result.url} failed: {result.error}")
    return NewsForParse(NewsSource.URL, NewsFormat.FULL, result.text)
