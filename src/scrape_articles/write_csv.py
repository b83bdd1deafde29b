"""CSV output for scraped articles."""

import csv
import logging
from pathlib import Path

from scrape_articles.models import Article

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["Title", "FeaturedImage", "PublishedDate", "Content", "GalleryImages"]


def article_row(article: Article) -> list[str]:
    """Flatten an article into CSV cells; gallery URLs are comma-joined."""
    return [
        article.title,
        article.featured_image,
        article.published_date,
        article.content,
        ",".join(article.gallery_images),
    ]


def write_csv(articles: list[Article], path: str) -> Path:
    """Write articles to `path`, replacing any existing file.

    OSError and csv.Error are left to the caller.
    """
    filepath = Path(path)
    with filepath.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        for article in articles:
            writer.writerow(article_row(article))

    logger.info("Saved %d articles to %s", len(articles), filepath)
    return filepath
