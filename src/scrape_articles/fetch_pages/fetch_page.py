"""Download a page and parse it into an lxml document."""

import logging

import requests
from lxml import html as lxml_html
from lxml.html import HtmlElement

from scrape_articles.config import RequestConfig

logger = logging.getLogger(__name__)


def fetch_page(url: str, request: RequestConfig | None = None) -> HtmlElement:
    """
    GET `url` and return the parsed document root.

    Raises requests.RequestException on network errors or any status other
    than 200, and lxml.etree.ParserError when the body is not parseable HTML.
    """
    request = request or RequestConfig()

    logger.debug("Fetching %s", url)
    response = requests.get(
        url,
        timeout=request.timeout,
        headers={"User-Agent": request.user_agent},
    )
    response.raise_for_status()
    if response.status_code != 200:
        raise requests.HTTPError(
            f"Unexpected status {response.status_code} for url: {url}", response=response
        )

    return lxml_html.document_fromstring(response.content)
