from __future__ import annotations

"""
Domain Error Taxonomy.

Exceptions raised by the listing reader, the aggregation tree and the
traversal layer. The CLI controller maps each family to an exit code.
"""


class DirStatError(Exception):
    """Base class for all recoverable and fatal rclonedirstat errors."""


class ListingReadError(DirStatError):
    """The listing source (file or stdin) could not be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Could not open file: {source} ({reason})")
        self.source = source
        self.reason = reason


class ListingParseError(DirStatError):
    """A listing line does not split into a numeric size and a path."""

    def __init__(self, line_no: int, line: str, reason: str):
        super().__init__(f"Malformed listing line {line_no}: {reason}: {line!r}")
        self.line_no = line_no
        self.line = line
        self.reason = reason


class PathNotFoundError(DirStatError):
    """A path segment does not exist in the aggregation tree."""

    def __init__(self, path: str, segment: str):
        super().__init__(f"Path not found: {path!r} (missing segment {segment!r})")
        self.path = path
        self.segment = segment


class PathConflictError(DirStatError):
    """An inserted path uses an existing file as an intermediate directory."""

    def __init__(self, path: str, segment: str):
        super().__init__(f"Cannot insert {path!r}: segment {segment!r} is a file")
        self.path = path
        self.segment = segment
