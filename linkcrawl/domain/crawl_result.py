"""Crawl result data model."""
from typing import NamedTuple, Tuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    `links` is the sorted, duplicate-free list of discovered URLs; the
    counters let callers log what happened along the way.
    """
    links: Tuple[str, ...]
    """Discovered same-site URLs, sorted ascending"""

    pages_fetched: int = 0
    """Number of pages fetched and parsed"""

    pages_failed: int = 0
    """Number of pages whose fetch failed (network error or non-200)"""
