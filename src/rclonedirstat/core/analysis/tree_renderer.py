from __future__ import annotations

"""
Size Tree Renderer.

Turns aggregation tree nodes into indented text lines and answers the
prefix-filtered sum over a raw listing.
"""

from typing import Callable, Iterable, List, Optional, Sequence

from rclonedirstat.domain.listing_models import ListingEntry
from rclonedirstat.domain.tree_models import Node
from rclonedirstat.utils.size_format import format_size

INDENT_UNIT = "  "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_size_tree(
        nodes: Sequence[Node],
        max_depth: int = 0,
        formatter: Callable[[int], str] = format_size,
) -> List[str]:
    """
    Render nodes as '<indent><name>: <size>' lines, depth-first.

    Directories are unfolded while their depth is below `max_depth`, so a
    depth of 0 only lists the given nodes. Children keep insertion order.

    Args:
        nodes: Top-level nodes to render (depth 0).
        max_depth: Deepest level whose children are still listed.
        formatter: Converts a byte count into display text.

    Returns:
        List[str]: One line per visited node.
    """
    lines: List[str] = []
    for node in nodes:
        _render_node(node, 0, max_depth, formatter, lines)
    return lines


def sum_under_prefix(listing: Iterable[ListingEntry], prefix: Optional[str] = None) -> int:
    """
    Sum the sizes of listing entries whose path starts with `prefix`.

    Plain string matching on the full path; '/ab' matches prefix '/a'.
    A blank prefix (the CLI default is a single space) applies no filter.
    """
    return sum(entry.size for entry in filter_listing(listing, prefix))


def filter_listing(listing: Iterable[ListingEntry], prefix: Optional[str] = None) -> List[ListingEntry]:
    """Keep the entries whose path starts with `prefix` (all when blank)."""
    if _is_blank(prefix):
        return list(listing)
    return [entry for entry in listing if entry.path.startswith(prefix)]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _is_blank(prefix: Optional[str]) -> bool:
    return prefix is None or not prefix.strip()


def _render_node(
        node: Node,
        depth: int,
        max_depth: int,
        formatter: Callable[[int], str],
        lines: List[str],
) -> None:
    lines.append(f"{INDENT_UNIT * depth}{node.name}: {formatter(node.size())}")

    directory = node.as_directory()
    if directory is None or depth >= max_depth:
        return

    for child in directory.children:
        _render_node(child, depth + 1, max_depth, formatter, lines)
