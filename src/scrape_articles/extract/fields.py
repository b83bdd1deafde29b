"""Pull raw field values out of index entries and article pages."""

import logging
from typing import Optional

from lxml.html import HtmlElement

from scrape_articles.config import Config
from scrape_articles.models import IndexEntry

logger = logging.getLogger(__name__)


def join_origin(base: str, path: str) -> str:
    """Prefix `path` with `base` exactly as given (no slash or escape handling)."""
    return base + path


def article_url(base: str, href: str) -> str:
    """Build the article page URL from an entry href."""
    return base + "/" + href


def select_first(node: HtmlElement, css: str) -> Optional[HtmlElement]:
    matches = node.cssselect(css)
    return matches[0] if matches else None


def first_attr(node: HtmlElement, css: str, attr: str) -> Optional[str]:
    """Return `attr` of the first element matching `css`, or None if absent.

    An empty attribute value is still a present value.
    """
    element = select_first(node, css)
    if element is None:
        return None
    return element.get(attr)


def select_text(node: HtmlElement, css: str) -> str:
    """Concatenated text content of every element matching `css`."""
    return "".join(element.text_content() for element in node.cssselect(css))


def extract_entry(node: HtmlElement, config: Config) -> IndexEntry:
    """Read image, link and date label from a single index entry node."""
    selectors = config.selectors

    featured_image = ""
    image_src = first_attr(node, selectors.entry_image, "src")
    if image_src is not None:
        featured_image = join_origin(config.base_url, image_src)

    return IndexEntry(
        link=first_attr(node, selectors.entry_link, "href"),
        featured_image=featured_image,
        date_label=select_text(node, selectors.entry_date).strip(),
        link_text=select_text(node, selectors.entry_link),
    )


def extract_entries(doc: HtmlElement, config: Config) -> list[IndexEntry]:
    """Enumerate every article entry on the index page, in document order."""
    entries = [extract_entry(node, config) for node in doc.cssselect(config.selectors.entry)]
    logger.info("Found %d entries on index page", len(entries))
    return entries


def extract_title(doc: HtmlElement, config: Config) -> str:
    return select_text(doc, config.selectors.article_title)
