"""
Glue between envelopes, the parser and output.

parse_news() is the shared entry point for the CLI: it decodes an envelope
with a fresh parser and returns the articles to show, or None when the
content could not be decoded. print_articles() renders them with rich.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.table import Table

from .core.types import AnyArticle, FullArticle
from .input.envelope import NewsForParse
from .logging_utils import Diagnostics, log_event
from .parser import NewsJsonParser

logger = logging.getLogger(__name__)


def parse_news(
    news: NewsForParse,
    diagnostics: Diagnostics,
    only_complete: bool = True,
) -> list[AnyArticle] | None:
    """Decode one envelope and return its articles.

    Args:
        news: The envelope to decode
        diagnostics: Sink for decode and filtering warnings
        only_complete: If False, incomplete articles are kept

    Returns:
        The decoded articles, or None if decoding failed
    """
    parser = NewsJsonParser(diagnostics)
    if not news.dispatch(parser):
        return None

    if only_complete:
        articles = parser.articles()
    else:
        articles = parser.storage.extract(False, diagnostics)

    log_event(
        logger,
        "Parsed news content",
        news_source=news.source.value,
        news_format=news.format.value,
        article_count=len(articles),
    )
    return articles


def print_articles(articles: list[AnyArticle], console: Console, title: str) -> None:
    table = Table(title=title, show_lines=True)
    table.add_column("Title")
    table.add_column("Source")
    table.add_column("Published")
    table.add_column("URL", overflow="fold")

    for article in articles:
        source_name = ""
        if isinstance(article, FullArticle) and article.source is not None:
            source_name = article.source.name or ""
        table.add_row(
            article.title or "",
            source_name,
            article.published_at or "",
            article.url or "",
        )

    console.print(table)
    console.print(f"{len(articles)} article(s)")
