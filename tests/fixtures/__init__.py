"""Test fixtures for the wiki adapter tests.

This module provides sample Azure DevOps REST payloads covering the three
page listing shapes, page reads, writes, search results and wiki listings.
"""

from .sample_pages import (
    FLAT_LISTING,
    NESTED_LISTING,
    SINGLE_ROOT,
    TIED_ORDER_LISTING,
    PAGE_READ,
    PAGE_WRITE_WRAPPED,
    SEARCH_RESPONSE,
    WIKI_LISTING,
)

__all__ = [
    "FLAT_LISTING",
    "NESTED_LISTING",
    "SINGLE_ROOT",
    "TIED_ORDER_LISTING",
    "PAGE_READ",
    "PAGE_WRITE_WRAPPED",
    "SEARCH_RESPONSE",
    "WIKI_LISTING",
]
