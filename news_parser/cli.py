"""
Command-line interface for the news parser.

Uses Typer to provide `parse` (local JSON file) and `headlines` (NewsAPI
query) commands. Supports loading .env files for the NewsAPI key.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .config import AppConfig, load_config
from .input.envelope import NewsFormat, news_from_api, news_from_file
from .logging_utils import LoggerDiagnostics, setup_logging
from .runner import parse_news, print_articles

app = typer.Typer(add_completion=False)
console = Console()


def _prepare(config: Path | None, log_level: str | None) -> tuple[AppConfig, LoggerDiagnostics]:
    load_dotenv()
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    logger = setup_logging(cfg.logging, Path(cfg.logging.log_dir))
    return cfg, LoggerDiagnostics(logger)


@app.command()
def parse(
    input_path: Path = typer.Argument(..., metavar="INPUT", help="JSON file to parse."),
    fmt: NewsFormat = typer.Option(NewsFormat.FULL, "--format", "-f", help="Expected envelope format."),
    show_all: bool | None = typer.Option(
        None, "--all/--complete-only", help="Include articles with missing fields."
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Parse a news JSON file and print its articles."""
    cfg, diagnostics = _prepare(config, log_level)
    only_complete = cfg.parse.only_complete if show_all is None else not show_all

    articles = parse_news(news_from_file(input_path, fmt, diagnostics), diagnostics, only_complete)
    if articles is None:
        console.print(f"[red]Could not parse {input_path}[/red]")
        raise typer.Exit(code=1)
    print_articles(articles, console, title=f"Articles parsed from '{input_path.name}'")


@app.command()
def headlines(
    params: str = typer.Option(
        "top-headlines?country=us", "--params", "-p", help="NewsAPI endpoint and query string."
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Query NewsAPI and print the complete articles."""
    cfg, diagnostics = _prepare(config, log_level)

    articles = parse_news(news_from_api(params, cfg.news_api, diagnostics), diagnostics)
    if articles is None:
        console.print("[red]Could not parse NewsAPI response[/red]")
        raise typer.Exit(code=1)
    print_articles(articles, console, title="Articles parsed from NewsAPI")


if __name__ == "__main__":
    app()
