"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging


def setup_logging(verbose: bool = False) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_article_count(value: str) -> int:
    """Parse an article count for argparse; -1 stands for "all".

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer >= -1.
    """
    try:
        count = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("num must be an integer") from exc
    if count < -1:
        raise argparse.ArgumentTypeError("num must be -1 (all) or a non-negative integer")
    return count
