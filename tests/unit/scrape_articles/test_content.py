"""Tests for scrape_articles.extract.content module."""

import logging
from unittest.mock import patch

import pytest
from lxml import etree

from scrape_articles.extract import content as content_module
from scrape_articles.extract.content import assemble_content, extract_gallery

START = "div#div_print p.semibold"
STOP = "div.tz-gallery"


class TestAssembleContent:
    def test_html_mode_keeps_markup_and_skips_blank(self, article_doc) -> None:
        content = assemble_content(article_doc, START, STOP, "html")
        assert content == "<p>First <b>paragraph</b></p><p>Third paragraph</p>"

    def test_text_mode_concatenates_text(self, article_doc) -> None:
        content = assemble_content(article_doc, START, STOP, "text")
        assert content == "First paragraphThird paragraph"

    def test_stops_before_gallery(self, article_doc) -> None:
        assert "After gallery" not in assemble_content(article_doc, START, STOP)

    def test_excludes_start_marker(self, article_doc) -> None:
        assert "Lead paragraph" not in assemble_content(article_doc, START, STOP)

    def test_runs_to_end_without_gallery(self, parse_html) -> None:
        doc = parse_html(
            '<html><body><div id="div_print">'
            '<p class="semibold">Lead</p><p>One</p><p>Two</p>'
            "</div></body></html>"
        )
        assert assemble_content(doc, START, STOP, "text") == "OneTwo"

    def test_missing_start_marker_returns_empty(self, parse_html) -> None:
        doc = parse_html('<html><body><div id="div_print"><p>One</p></div></body></html>')
        assert assemble_content(doc, START, STOP) == ""

    def test_skips_comments(self, parse_html) -> None:
        doc = parse_html(
            '<html><body><div id="div_print">'
            '<p class="semibold">Lead</p><!-- note --><p>One</p>'
            "</div></body></html>"
        )
        assert assemble_content(doc, START, STOP) == "<p>One</p>"

    def test_blank_middle_paragraph_dropped(self, parse_html) -> None:
        doc = parse_html(
            '<html><body><div id="div_print">'
            '<p class="semibold">Lead</p><p>A</p><p> \n\t</p><p>C</p>'
            "</div></body></html>"
        )
        assert assemble_content(doc, START, STOP) == "<p>A</p><p>C</p>"

    def test_unserializable_paragraph_is_omitted(self, article_doc, caplog) -> None:
        real_serialize = content_module._serialize

        def failing_on_first(element, mode):
            if element.text_content().startswith("First"):
                raise etree.SerialisationError("cannot serialize")
            return real_serialize(element, mode)

        with patch("scrape_articles.extract.content._serialize", side_effect=failing_on_first):
            with caplog.at_level(logging.WARNING, logger="scrape_articles.extract.content"):
                content = assemble_content(article_doc, START, STOP)

        assert content == "<p>Third paragraph</p>"
        assert "failed to serialize" in caplog.text

    def test_unknown_mode_raises(self, article_doc) -> None:
        with pytest.raises(ValueError):
            assemble_content(article_doc, START, STOP, "markdown")


class TestExtractGallery:
    def test_absolute_urls_in_document_order(self, article_doc) -> None:
        images = extract_gallery(article_doc, "div.tz-gallery a.lightbox img", "https://md.rks-gov.net")
        assert images == ["https://md.rks-gov.net/g/1.jpg", "https://md.rks-gov.net/g/2.jpg"]

    def test_no_gallery_returns_empty_list(self, parse_html) -> None:
        doc = parse_html("<html><body><p>x</p></body></html>")
        assert extract_gallery(doc, "div.tz-gallery a.lightbox img", "https://x") == []

    def test_ignores_images_without_src(self, parse_html) -> None:
        doc = parse_html(
            '<html><body><div class="tz-gallery">'
            '<a class="lightbox"><img></a><a class="lightbox"><img src="/b.jpg"></a>'
            "</div></body></html>"
        )
        assert extract_gallery(doc, "div.tz-gallery a.lightbox img", "https://x") == ["https://x/b.jpg"]
