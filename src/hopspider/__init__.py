"""
Bounded-hop web crawler: follows one new link per page from a seed address.
"""
from hopspider.core import crawl, CrawlState, CrawlStats, Spider
from hopspider.errors import (
    CrawlError,
    InsufficientLinks,
    InvalidAddress,
    InvalidBudget,
    MissingInput,
    ValidationError,
)

__version__ = "1.0.0"
__all__ = [
    "crawl",
    "CrawlState",
    "CrawlStats",
    "Spider",
    "CrawlError",
    "InsufficientLinks",
    "InvalidAddress",
    "InvalidBudget",
    "MissingInput",
    "ValidationError",
]
