"""Article body and gallery extraction."""

import logging

from lxml import etree
from lxml import html as lxml_html
from lxml.html import HtmlElement

from scrape_articles.extract.fields import join_origin

logger = logging.getLogger(__name__)

CONTENT_MODES = ("html", "text")


def iter_content_run(start: HtmlElement, stop: set[HtmlElement]):
    """Yield the element siblings after `start`, ending before the first one in `stop`."""
    for sibling in start.itersiblings():
        # Comments and processing instructions are not content
        if not isinstance(sibling.tag, str):
            continue
        if sibling in stop:
            return
        yield sibling


def _serialize(element: HtmlElement, mode: str) -> str:
    if mode == "text":
        return element.text_content()
    return lxml_html.tostring(element, encoding="unicode", with_tail=False)


def assemble_content(doc: HtmlElement, start_css: str, stop_css: str, mode: str = "html") -> str:
    """
    Concatenate the body paragraphs that follow the content start marker.

    The run begins after the first element matching `start_css` and ends
    before the first sibling matching `stop_css`, or at the last sibling if
    there is none. Elements whose text is blank are skipped. In "html" mode
    each element contributes its outer markup, in "text" mode its text.

    A missing start marker yields an empty string.
    """
    if mode not in CONTENT_MODES:
        raise ValueError(f"Unknown content mode: {mode}")

    starts = doc.cssselect(start_css)
    if not starts:
        logger.debug("No content start marker matching %r", start_css)
        return ""

    stop = set(doc.cssselect(stop_css))

    parts = []
    for element in iter_content_run(starts[0], stop):
        if not element.text_content().strip():
            continue
        try:
            parts.append(_serialize(element, mode))
        except etree.LxmlError as e:
            logger.warning("Skipping <%s> that failed to serialize: %s", element.tag, e)

    return "".join(parts)


def extract_gallery(doc: HtmlElement, css: str, base_url: str) -> list[str]:
    """Absolute URLs of gallery images in document order; images without src are ignored."""
    images = []
    for img in doc.cssselect(css):
        src = img.get("src")
        if src is not None:
            images.append(join_origin(base_url, src))
    return images
