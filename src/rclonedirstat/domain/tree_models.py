from __future__ import annotations

"""
Aggregation Tree Data Models.

Provides the two node kinds of the size hierarchy: immutable file leaves
carrying a byte count, and mutable directories owning an ordered list of
children plus a memoized aggregate size.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the size hierarchy.

    Attributes:
        name: Single path segment naming the file.
        file_size: Size in bytes, fixed at construction.
    """
    name: str
    file_size: int

    def size(self) -> int:
        return self.file_size

    def is_directory(self) -> bool:
        return False

    def as_directory(self) -> Optional[DirectoryNode]:
        return None


@dataclass(eq=False)
class DirectoryNode:
    """
    Represents an interior entry (directory) in the size hierarchy.

    Children are kept in insertion order. The aggregate size is computed
    lazily from the direct children and memoized until a child is appended.
    A fresh directory is empty, so its cache starts valid at zero.

    Attributes:
        name: Single path segment naming the directory ("" for the root).
        children: Owned child nodes, in insertion order.
        cache_valid: Whether cached_size reflects the current children.
        cached_size: Last computed aggregate size.
        recompute_count: Number of cache misses served so far.
    """
    name: str
    children: List[Node] = field(default_factory=list)
    cache_valid: bool = True
    cached_size: int = 0
    recompute_count: int = 0

    def size(self) -> int:
        """
        Return the aggregate size of this directory.

        On a cache miss the direct children are summed once. Directory
        children answer from their own cache, stale or not.
        """
        if self.cache_valid:
            return self.cached_size

        total = 0
        for child in self.children:
            total += child.size()
        self.cached_size = total
        self.cache_valid = True
        self.recompute_count += 1
        return total

    def is_directory(self) -> bool:
        return True

    def as_directory(self) -> Optional[DirectoryNode]:
        return self

    def add_child(self, child: Node) -> Node:
        """Append a child and invalidate this directory's cache only."""
        self.children.append(child)
        self.cache_valid = False
        return child

    def find_child(self, name: str) -> Optional[Node]:
        """Linear scan of the children for an exact name match."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def invalidate(self) -> None:
        self.cache_valid = False


Node = Union[FileNode, DirectoryNode]
