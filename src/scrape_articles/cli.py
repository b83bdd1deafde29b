"""CLI for scraping articles into a CSV file."""

from __future__ import annotations

import logging
import sys

import yaml
from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from scrape_articles.config import load_config, set_config
from scrape_articles.helpers import parse_scrape_articles_args
from scrape_articles.scrape_articles import scrape_articles
from scrape_articles.write_csv import write_csv

load_dotenv()

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_scrape_articles_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load config %s: %s", args.config or "(default)", e)
        sys.exit(1)

    if args.mode:
        config.mode = args.mode
    if args.output:
        config.output.path = args.output
    set_config(config)

    try:
        articles = scrape_articles(max_articles=args.num)
    except Exception as e:
        logger.error("Scrape of %s failed: %s", config.index_url, e, exc_info=True)
        sys.exit(1)

    if not articles:
        logger.warning("No articles scraped")

    try:
        path = write_csv(articles, config.output.path)
    except Exception as e:
        logger.error("Failed to write %s: %s", config.output.path, e, exc_info=True)
        sys.exit(1)

    print(f"Data successfully written to {path}")


if __name__ == "__main__":
    main()
