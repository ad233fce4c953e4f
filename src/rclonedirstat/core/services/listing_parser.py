from __future__ import annotations

"""
Listing Reader and Parser.

Reads `rclone ls`-style listings, one file per line: a right-aligned byte
count, a space, then the path relative to the remote root:

       100 home/user/file.txt
      1200 home/user/dir/file 2.txt

Parsing is strict: the first malformed line aborts the whole read. Blank
lines are skipped on purpose, since listings commonly end with a trailing
newline and concatenated listings may carry empty separator lines. The size
field must be ASCII digits with an optional sign.
"""

import logging
import re
import sys
from typing import Iterable, List, TextIO

from rclonedirstat.domain.exceptions import ListingParseError, ListingReadError
from rclonedirstat.domain.listing_models import ListingEntry

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"

_SIZE_RE = re.compile(r"[+-]?[0-9]+")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_listing(source: str = STDIN_SOURCE) -> List[ListingEntry]:
    """
    Load and parse a listing from a file path or standard input.

    Args:
        source: File path, or '-' for stdin.

    Returns:
        List[ListingEntry]: Parsed entries in input order.

    Raises:
        ListingReadError: The source cannot be opened or decoded.
        ListingParseError: A line is malformed.
    """
    if source == STDIN_SOURCE:
        logger.debug("Reading listing from standard input.")
        return _parse_stream(sys.stdin, "<stdin>")

    logger.debug(f"Reading listing from file: {source}")
    try:
        with open(source, "r", encoding="utf-8") as f:
            return _parse_stream(f, source)
    except OSError as e:
        raise ListingReadError(source, e.strerror or str(e)) from e


def parse_listing(lines: Iterable[str]) -> List[ListingEntry]:
    """
    Parse listing lines into entries.

    Blank lines are skipped. Negative sizes (rclone prints -1 when a size is
    unknown) are clamped to zero. Paths are returned with a leading '/'.

    Raises:
        ListingParseError: A line has no integer size or no path.
    """
    listing: List[ListingEntry] = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        listing.append(parse_line(line, line_no))
    return listing


def parse_line(line: str, line_no: int = 1) -> ListingEntry:
    """Split one stripped line into its size and its rooted path."""
    parts = line.split(" ")
    if len(parts) < 2:
        raise ListingParseError(line_no, line, "missing path")

    if not _SIZE_RE.fullmatch(parts[0]):
        raise ListingParseError(line_no, line, "size is not an integer")
    size = int(parts[0])

    path = "/" + " ".join(parts[1:])
    return ListingEntry(size=max(size, 0), path=path)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _parse_stream(stream: TextIO, label: str) -> List[ListingEntry]:
    try:
        listing = parse_listing(stream)
    except UnicodeDecodeError as e:
        raise ListingReadError(label, f"invalid UTF-8: {e.reason}") from e
    logger.info(f"Parsed {len(listing)} listing entries from {label}.")
    return listing
