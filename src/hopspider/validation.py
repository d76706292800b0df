"""
Pre-flight checks for the seed address and hop budget.
"""
from __future__ import annotations

import re
from typing import Optional

from hopspider.errors import InvalidAddress, InvalidBudget, MissingInput

# Loose shape check, not RFC 3986: scheme and "www." optional, dotted host
# ending in a short alphabetic TLD, optional path.
ADDRESS_PATTERN = re.compile(
    r"(https?://)?(www\.)?[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,6}(/\S*)?"
)


def is_well_formed(address: str) -> bool:
    """Check the address against the loose URL shape."""
    return ADDRESS_PATTERN.fullmatch(address) is not None


def require_address(address: Optional[str]) -> str:
    """Reject a missing or blank address."""
    if address is None:
        raise MissingInput("Validation failed. url cannot be null.")
    if not address.strip():
        raise MissingInput("Validation failed. url cannot be an empty string.")
    return address


def validate_hops(hops: int) -> int:
    """Require a positive integer hop count."""
    if isinstance(hops, bool) or not isinstance(hops, int) or hops <= 0:
        raise InvalidBudget("Validation failed. hops must be greater than 0.")
    return hops


def validate_address(address: Optional[str]) -> str:
    """Require a present, well-formed seed address."""
    address = require_address(address)
    if not is_well_formed(address):
        raise InvalidAddress(address)
    return address


def validate(hops: int, address: Optional[str]) -> None:
    """
    Run every pre-flight check.

    Order: address present, address non-empty, budget, address shape.
    """
    require_address(address)
    validate_hops(hops)
    validate_address(address)
