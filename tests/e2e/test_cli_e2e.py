from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes and
the stdout/stderr contract of the `sum` and `tree` commands.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "rclonedirstat" / "main.py"


def run_cli(args: List[str], stdin: Optional[str] = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH and ignores any user config
    file so results only depend on the arguments.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT), "--use-defaults"] + args

    return subprocess.run(
        cmd,
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def listing_file(tmp_path: Path) -> Path:
    """
    Listing with a nested layout, a zero-size file and a path with spaces.
    """
    path = tmp_path / "listing.txt"
    path.write_text(
        "     1024 photos/2023/a.jpg\n"
        "     2048 photos/2023/b.jpg\n"
        "      512 photos/notes and ideas.txt\n"
        "        0 photos/empty.txt\n"
        "      100 docs/readme.md\n",
        encoding="utf-8",
    )
    return path


def test_sum_total(listing_file: Path):
    result = run_cli([str(listing_file), "sum"])

    assert result.returncode == 0, result.stderr
    assert result.stdout == "3684\n"


def test_sum_prefix_human(listing_file: Path):
    result = run_cli([str(listing_file), "/photos/2023", "sum", "--human"])

    assert result.returncode == 0, result.stderr
    assert result.stdout == "3.00KB\n"


def test_tree_from_stdin(listing_file: Path):
    result = run_cli(["tree", "--depth", "1"], stdin=listing_file.read_text(encoding="utf-8"))

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "photos: 3.50KB",
        "  2023: 3.00KB",
        "  notes and ideas.txt: 512.00B",
        "docs: 100.00B",
        "  readme.md: 100.00B",
    ]


def test_tree_missing_file_exit_code(tmp_path: Path):
    result = run_cli([str(tmp_path / "absent.txt"), "tree"])

    assert result.returncode == 1
    assert "Could not open file" in result.stderr
    assert result.stdout == ""


def test_no_subcommand_exit_code():
    result = run_cli([])

    assert result.returncode == 1
    assert "No subcommand provided" in result.stderr


def test_flag_between_file_and_command(listing_file: Path):
    result = run_cli([str(listing_file), "--human", "sum"])

    assert result.returncode == 0, result.stderr
    assert result.stdout == "3.60KB\n"


def test_flag_between_prefix_and_command(listing_file: Path):
    result = run_cli([str(listing_file), "/photos", "--depth", "1", "tree"])

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "photos: 3.50KB",
        "  2023: 3.00KB",
        "  notes and ideas.txt: 512.00B",
    ]
