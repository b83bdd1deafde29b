"""Shared HTML fixtures for scrape_articles tests."""

import pytest
from lxml import html as lxml_html

from scrape_articles.config import Config, reset_config

ARTICLE_HTML = """
<html><body>
<h3>Ministri viziton kazermen</h3>
<div id="div_print">
  <p class="semibold">Lead paragraph</p>
  <p>First <b>paragraph</b></p>
  <p>   </p>
  <p>Third paragraph</p>
  <div class="tz-gallery">
    <a class="lightbox" href="/g/1_big.jpg"><img src="/g/1.jpg"></a>
    <a class="lightbox" href="/g/2_big.jpg"><img src="/g/2.jpg"></a>
  </div>
  <p>After gallery</p>
</div>
</body></html>
"""


def _entry_html(href, date, image="/img/thumb.jpg", text="Headline") -> str:
    img = f'<div class="port-img"><img src="{image}"></div>' if image is not None else ""
    link = f'<a href="{href}">{text}</a>' if href is not None else f"<span>{text}</span>"
    return (
        '<div class="portfolio-grid">'
        f"{img}"
        f'<div class="caption"><h3>{link}</h3><span class="date">Postuar me: {date} </span></div>'
        "</div>"
    )


def _index_html(*entries: str) -> str:
    # The trailing grid sits outside the news panel and must never be picked up
    return (
        "<html><body>"
        '<div id="MainContent_ctl00_pnlLajmet">'
        + "".join(entries)
        + "</div>"
        '<div class="portfolio-grid"><h3><a href="outside.aspx">Not listed</a></h3></div>'
        "</body></html>"
    )


@pytest.fixture
def entry_html():
    return _entry_html


@pytest.fixture
def index_html():
    return _index_html


@pytest.fixture
def parse_html():
    return lxml_html.document_fromstring


@pytest.fixture
def article_doc():
    return lxml_html.document_fromstring(ARTICLE_HTML)


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def simple_config() -> Config:
    return Config(mode="simple")


@pytest.fixture(autouse=True)
def _reset_global_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def article_html() -> str:
    return ARTICLE_HTML
