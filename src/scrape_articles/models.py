"""Data models for scrape_articles."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


class DateParseError(ValueError):
    """Raised when a listing date label does not hold a DD/MM/YYYY date."""


@dataclass
class IndexEntry:
    """One article teaser on the index page."""
    link: Optional[str]
    featured_image: str = ""
    date_label: str = ""
    link_text: str = ""


@dataclass
class Article:
    """Article assembled from an index entry and its article page."""
    title: str
    featured_image: str
    published_date: str
    content: str
    gallery_images: list[str] = field(default_factory=list)
    # Sort key only, never written out
    date_time: Optional[datetime] = None
