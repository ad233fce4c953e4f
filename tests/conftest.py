from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared listing fixtures used across unit and e2e tests.
"""

import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from rclonedirstat.domain.listing_models import ListingEntry  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_listing() -> List[ListingEntry]:
    """
    Return the three-file listing used throughout the suite.

    Layout:
    /a
      x.txt (5)
      y.txt (7)
    b.txt (3)
    """
    return [
        ListingEntry(size=5, path="/a/x.txt"),
        ListingEntry(size=7, path="/a/y.txt"),
        ListingEntry(size=3, path="/b.txt"),
    ]


@pytest.fixture
def sample_listing_text() -> str:
    """Return the sample listing as right-aligned `rclone ls` output."""
    return "        5 a/x.txt\n        7 a/y.txt\n        3 b.txt\n"


@pytest.fixture
def default_conf() -> Dict[str, Any]:
    """Return a complete, validated configuration dictionary."""
    return {
        "file": "-",
        "prefix": " ",
        "depth": 0,
        "human": False,
        "size_precision": 2,
        "skip_empty_in_tree": True,
        "propagate_invalidation": False,
        "log_level": "WARNING",
        "log_file": "",
    }
