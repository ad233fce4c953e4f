from __future__ import annotations

"""
Unit tests for the Size Tree Renderer.

Verifies depth bounding, indentation, ordering, and the prefix-filtered
sum over raw listings.
"""

import pytest

from rclonedirstat.core.analysis.aggregation_tree import AggregationTree
from rclonedirstat.core.analysis.tree_renderer import (
    filter_listing,
    render_size_tree,
    sum_under_prefix,
)
from rclonedirstat.domain.listing_models import ListingEntry


@pytest.fixture
def nested_tree() -> AggregationTree[int]:
    """
    Layout:
    /a
      /b
        c.txt (1024)
      d.txt (512)
    e.txt (1)
    """
    tree: AggregationTree[int] = AggregationTree()
    tree.insert("/a/b/c.txt", 1024)
    tree.insert("/a/d.txt", 512)
    tree.insert("/e.txt", 1)
    return tree


def test_depth_zero_lists_top_level_only(sample_listing):
    tree: AggregationTree[int] = AggregationTree()
    for entry in sample_listing:
        tree.insert(entry.path, entry.size)

    lines = render_size_tree(tree.children(None), max_depth=0)

    assert lines == ["a: 12.00B", "b.txt: 3.00B"]


def test_depth_one_unfolds_one_level(nested_tree):
    lines = render_size_tree(nested_tree.children(None), max_depth=1)

    assert lines == [
        "a: 1.50KB",
        "  b: 1.00KB",
        "  d.txt: 512.00B",
        "e.txt: 1.00B",
    ]


def test_large_depth_unfolds_everything(nested_tree):
    lines = render_size_tree(nested_tree.children(None), max_depth=10)

    assert lines == [
        "a: 1.50KB",
        "  b: 1.00KB",
        "    c.txt: 1.00KB",
        "  d.txt: 512.00B",
        "e.txt: 1.00B",
    ]


def test_custom_formatter_receives_raw_sizes(nested_tree):
    lines = render_size_tree(nested_tree.children(None), max_depth=0, formatter=str)

    assert lines == ["a: 1536", "e.txt: 1"]


def test_render_empty_sequence():
    assert render_size_tree([], max_depth=3) == []

# -----------------------------------------------------------------------------
# Prefix filtering over raw listings
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("prefix, expected", [
    ("/a", 12),
    ("/", 15),
    ("/zz", 0),
    ("/a/y", 7),
])
def test_sum_under_prefix(sample_listing, prefix, expected):
    assert sum_under_prefix(sample_listing, prefix) == expected


@pytest.mark.parametrize("prefix", [None, "", " ", "  "])
def test_blank_prefix_applies_no_filter(sample_listing, prefix):
    assert sum_under_prefix(sample_listing, prefix) == 15
    assert len(filter_listing(sample_listing, prefix)) == 3


def test_prefix_is_plain_string_match():
    listing = [
        ListingEntry(size=1, path="/a/f"),
        ListingEntry(size=2, path="/ab"),
    ]

    assert sum_under_prefix(listing, "/a") == 3
    assert filter_listing(listing, "/a/") == [ListingEntry(size=1, path="/a/f")]
