from __future__ import annotations

"""
Path-Segmented Aggregation Tree.

Builds a directory hierarchy from slash-delimited paths inserted one at a
time and keeps a flat full-path index next to it. Directory sizes are
computed lazily by the nodes themselves; this module decides which
directories lose their cached value when the hierarchy grows.

Invalidation is local by default: appending a child to a directory marks
only that directory stale. Ancestors that already cached a value keep it
until they are themselves appended to. Build the whole tree before asking
for sizes, or construct the tree with ``propagate_invalidation=True``.
"""

import logging
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from rclonedirstat.domain.exceptions import PathConflictError, PathNotFoundError
from rclonedirstat.domain.tree_models import DirectoryNode, FileNode, Node

logger = logging.getLogger(__name__)

V = TypeVar("V")

PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(path: str) -> List[str]:
    """Split a path into its non-empty segments ('/a//b' == 'a/b')."""
    return [part for part in path.split(PATH_SEPARATOR) if part]


class AggregationTree(Generic[V]):
    """
    Directory hierarchy with memoized aggregate sizes and a full-path index.

    The root is an unnamed directory and never appears in the index. The
    index maps every inserted path verbatim to its value (last insert wins)
    and is independent of how the hierarchy normalized the path.
    """

    def __init__(
            self,
            *,
            propagate_invalidation: bool = False,
            size_of: Optional[Callable[[V], int]] = None,
    ):
        """
        Args:
            propagate_invalidation: Invalidate every directory on the
                insertion path instead of the receiving directory only.
            size_of: Extracts a byte count from a non-numeric value.
        """
        self._root = DirectoryNode(name="")
        self._index: Dict[str, V] = {}
        self._propagate = propagate_invalidation
        self._size_of = size_of

    @property
    def root(self) -> DirectoryNode:
        return self._root

    # --- Insertion ---

    def insert(self, path: str, value: V) -> None:
        """
        Record a value under its full path and graft the path onto the tree.

        Every segment but the last becomes (or reuses) a directory; the last
        becomes a file leaf carrying the value's size. Existing nodes are
        never replaced, so a repeated path only updates the index.

        Raises:
            PathConflictError: An intermediate segment is an existing file.
        """
        self._index[path] = value

        segments = split_path(path)
        if not segments:
            logger.debug(f"Path {path!r} has no segments; indexed only.")
            return

        current = self._root
        visited: List[DirectoryNode] = [current]

        for segment in segments[:-1]:
            child = current.find_child(segment)
            if child is None:
                child = current.add_child(DirectoryNode(name=segment))
            directory = child.as_directory()
            if directory is None:
                raise PathConflictError(path, segment)
            current = directory
            visited.append(current)

        leaf_name = segments[-1]
        if current.find_child(leaf_name) is not None:
            logger.debug(f"Node {leaf_name!r} already exists under {current.name!r}; kept.")
            return

        current.add_child(FileNode(name=leaf_name, file_size=self._value_size(value)))

        if self._propagate:
            for directory in visited:
                directory.invalidate()

    # --- Queries ---

    def size_under(self, prefix: str) -> int:
        """
        Sum the values of every indexed path starting with `prefix`.

        Plain string matching on the unsplit path, so '/ab' is under '/a'.
        """
        return sum(
            self._value_size(value)
            for path, value in self._index.items()
            if path.startswith(prefix)
        )

    def children(self, path: Optional[str] = None) -> List[Node]:
        """
        Resolve a path without creating nodes and return its children.

        Args:
            path: Directory to list; None (or no segments) lists the root.

        Returns:
            List[Node]: Children in insertion order.

        Raises:
            PathNotFoundError: A segment is missing or names a file.
        """
        current = self._root
        for segment in split_path(path or ""):
            child = current.find_child(segment)
            directory = child.as_directory() if child is not None else None
            if directory is None:
                raise PathNotFoundError(path or "", segment)
            current = directory
        return list(current.children)

    def total_size(self) -> int:
        return self._root.size()

    # --- Full-path index ---

    def get(self, path: str, default: Optional[V] = None) -> Optional[V]:
        return self._index.get(path, default)

    def paths(self) -> Iterator[str]:
        return iter(self._index)

    def __contains__(self, path: object) -> bool:
        return path in self._index

    def __len__(self) -> int:
        return len(self._index)

    # --- Helpers ---

    def _value_size(self, value: V) -> int:
        if self._size_of is not None:
            return max(int(self._size_of(value)), 0)
        return max(int(value), 0)  # type: ignore[call-overload]
