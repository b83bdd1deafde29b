"""Listing date parsing."""

import re
from datetime import datetime, timezone

from scrape_articles.models import DateParseError

DATE_FORMAT = "%d/%m/%Y"

# strptime alone would also accept single-digit days and months and non-ASCII digits
_DATE_TOKEN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")


def last_token(label: str) -> str:
    """Return the last space-separated piece of a date label."""
    return label.split(" ")[-1]


def parse_date(label: str) -> tuple[datetime, str]:
    """
    Parse the date at the end of a listing label such as "Postuar me: 15/03/2024".

    Returns the date as a UTC midnight datetime together with its DD/MM/YYYY
    rendering. Raises DateParseError when the last token is not a valid date.
    """
    token = last_token(label)
    if not _DATE_TOKEN.fullmatch(token):
        raise DateParseError(f"Unrecognised date {token!r} in label {label!r}")

    try:
        parsed = datetime.strptime(token, DATE_FORMAT)
    except ValueError as exc:
        raise DateParseError(f"Invalid date {token!r}: {exc}") from exc

    parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed, parsed.strftime(DATE_FORMAT)
