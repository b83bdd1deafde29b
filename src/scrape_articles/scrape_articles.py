"""Scrape every article linked from the index page."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

import requests
from lxml import etree
from lxml.html import HtmlElement
from tqdm import tqdm

from scrape_articles.config import Config, RequestConfig, get_config
from scrape_articles.extract.content import assemble_content, extract_gallery
from scrape_articles.extract.dates import DATE_FORMAT, parse_date
from scrape_articles.extract.fields import article_url, extract_entries, extract_title
from scrape_articles.fetch_pages.fetch_page import fetch_page
from scrape_articles.models import Article, DateParseError, IndexEntry

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, RequestConfig], HtmlElement]


def resolve_limit(max_articles: Optional[int], total: int) -> int:
    """Number of entries to process; None or a negative value means all of them."""
    if max_articles is None or max_articles < 0 or max_articles > total:
        return total
    return max_articles


def build_article(entry: IndexEntry, doc: HtmlElement, config: Config) -> Article:
    """Compose one Article from an index entry and its parsed article page.

    Raises DateParseError in rich mode when the entry's date label is unusable.
    """
    selectors = config.selectors

    if config.is_rich:
        date_time, published_date = parse_date(entry.date_label)
        title = extract_title(doc, config)
        content_mode = "html"
    else:
        date_time, published_date = None, entry.date_label
        title = entry.link_text
        content_mode = "text"

    return Article(
        title=title,
        featured_image=entry.featured_image,
        published_date=published_date,
        content=assemble_content(doc, selectors.content_start, selectors.content_stop, content_mode),
        gallery_images=extract_gallery(doc, selectors.gallery_image, config.base_url),
        date_time=date_time,
    )


def _scrape_entry(entry: IndexEntry, config: Config, fetch: Fetcher) -> Optional[Article]:
    """Fetch and build a single article, or return None if it has to be skipped."""
    if entry.link is None:
        logger.warning("Skipping entry without a link")
        return None

    url = article_url(config.base_url, entry.link)
    try:
        doc = fetch(url, config.request)
    except requests.RequestException as e:
        logger.warning("Failed to fetch article page %s: %s", url, e)
        return None
    except etree.LxmlError as e:
        logger.warning("Failed to parse article page %s: %s", url, e)
        return None

    try:
        return build_article(entry, doc, config)
    except DateParseError as e:
        logger.warning("Skipping %s: %s", url, e)
        return None


def scrape_articles(
    config: Optional[Config] = None,
    max_articles: Optional[int] = None,
    fetch: Fetcher = fetch_page,
) -> list[Article]:
    """
    Scrape the index page and every article it links to.

    Errors fetching or parsing the index page propagate. Failures on a single
    article are logged and that article is left out. At most `max_articles`
    entries are processed, counting skipped ones.

    In rich mode the result is sorted newest first and restamped.
    """
    config = config or get_config()

    logger.info("Fetching index page %s", config.index_url)
    index_doc = fetch(config.index_url, config.request)

    entries = extract_entries(index_doc, config)
    limit = resolve_limit(max_articles, len(entries))

    articles: list[Article] = []
    cursor = 0
    with tqdm(total=limit, unit="article") as progress:
        for entry in entries:
            if cursor >= limit:
                break
            article = _scrape_entry(entry, config, fetch)
            if article is not None:
                articles.append(article)
            cursor += 1
            progress.update(1)

    logger.info("Scraped %d of %d processed entries", len(articles), cursor)

    if config.is_rich:
        articles = restamp_articles(articles)
    return articles


def sort_articles(articles: list[Article]) -> list[Article]:
    """Newest first; articles sharing a date keep their discovery order."""
    return sorted(articles, key=lambda a: a.date_time, reverse=True)


def restamp_articles(articles: list[Article], now: Optional[datetime] = None) -> list[Article]:
    """
    Sort articles newest first and give each a "DD/MM/YYYY HH:MM" display date.

    The date part is the article's own date. The clock part starts at `now`
    (local time by default) and goes back one minute per article, so the
    exported rows read as strictly descending even when dates collide. The
    clock is synthetic and is not the real publication time.
    """
    clock = now or datetime.now()

    ordered = sort_articles(articles)
    for article in ordered:
        article.published_date = (
            article.date_time.strftime(DATE_FORMAT) + " " + clock.strftime("%H:%M")
        )
        clock -= timedelta(minutes=1)
    return ordered
