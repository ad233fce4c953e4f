from __future__ import annotations

"""
Listing Domain Data Models.

Defines the record produced by the listing parser and consumed by the
aggregation tree and the prefix-sum query.
"""

from dataclasses import dataclass

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ListingEntry:
    """
    One line of a size listing.

    Attributes:
        size: File size in bytes (never negative).
        path: Full path of the file, always starting with '/'.
    """
    size: int
    path: str
