"""
Exceptions raised for fatal crawl conditions.

Per-page transport failures are not exceptions; see ``fetcher.Unreachable``.
"""
from __future__ import annotations

from typing import Optional


class CrawlError(Exception):
    """Base class for errors that abort a crawl."""


class ValidationError(CrawlError, ValueError):
    """Pre-flight check failed; no network activity has happened."""


class MissingInput(ValidationError):
    pass


class InvalidAddress(ValidationError):
    def __init__(self, address: Optional[str] = None) -> None:
        super().__init__("Malformed URL. URL must follow a standard well-formed pattern.")
        self.address = address


class InvalidBudget(ValidationError):
    pass


class InsufficientLinks(CrawlError):
    """Frontier ran dry before the hop budget was spent."""

    def __init__(self, remaining_hops: Optional[int] = None) -> None:
        if remaining_hops is None:
            message = "No valid links left!"
        else:
            message = f"Not enough valid links to complete {remaining_hops} hops!"
        super().__init__(message)
        self.remaining_hops = remaining_hops
