"""Helper functions for scrape_articles CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import parse_article_count
from scrape_articles.config import MODES


def parse_scrape_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for scrape_articles.'''

    parser = argparse.ArgumentParser(
        description="Scrape the news index page and write its articles to CSV."
    )
    parser.add_argument(
        "--num",
        type=parse_article_count,
        default=-1,
        help="The number of articles to crawl (default: all articles).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: $SCRAPER_CONFIG or prod).",
    )
    parser.add_argument("--output", default=None, help="CSV path (overrides output.path).")
    parser.add_argument("--mode", choices=MODES, default=None, help="Override the config mode.")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)
