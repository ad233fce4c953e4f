from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs `main()` in-process against temporary listing files and checks the
stdout contract of the `sum` and `tree` commands plus exit codes.
"""

import json
from pathlib import Path

import pytest

from rclonedirstat.domain.listing_models import ListingEntry
from rclonedirstat.infra.logging import shutdown_logging
from rclonedirstat.interface.cli.app import build_tree, main, run_sum, run_tree


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    shutdown_logging()


@pytest.fixture
def listing_file(tmp_path: Path, sample_listing_text: str) -> Path:
    path = tmp_path / "listing.txt"
    path.write_text(sample_listing_text, encoding="utf-8")
    return path


def run_main(capsys, argv):
    code = main(["--use-defaults"] + argv)
    out, err = capsys.readouterr()
    return code, out, err


def test_sum_prints_raw_bytes(capsys, listing_file):
    code, out, _ = run_main(capsys, [str(listing_file), "sum"])

    assert code == 0
    assert out == "15\n"


def test_sum_with_prefix(capsys, listing_file):
    code, out, _ = run_main(capsys, [str(listing_file), "/a", "sum"])

    assert code == 0
    assert out == "12\n"


def test_sum_human(capsys, listing_file):
    code, out, _ = run_main(capsys, ["--human", str(listing_file), "sum"])

    assert code == 0
    assert out == "15.00B\n"


def test_flag_between_file_and_command(capsys, listing_file):
    code, out, _ = run_main(capsys, [str(listing_file), "--human", "sum"])

    assert code == 0
    assert out == "15.00B\n"


def test_tree_depth_zero(capsys, listing_file):
    code, out, _ = run_main(capsys, [str(listing_file), "tree"])

    assert code == 0
    assert out.splitlines() == ["a: 12.00B", "b.txt: 3.00B"]


def test_tree_depth_one(capsys, listing_file):
    code, out, _ = run_main(capsys, [str(listing_file), "tree", "--depth", "1"])

    assert code == 0
    assert out.splitlines() == [
        "a: 12.00B",
        "  x.txt: 5.00B",
        "  y.txt: 7.00B",
        "b.txt: 3.00B",
    ]


def test_tree_reads_stdin(capsys, monkeypatch, sample_listing_text):
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO(sample_listing_text))

    code, out, _ = run_main(capsys, ["tree"])

    assert code == 0
    assert out.splitlines() == ["a: 12.00B", "b.txt: 3.00B"]


def test_missing_subcommand_fails(capsys, listing_file):
    code, out, err = run_main(capsys, [str(listing_file)])

    assert code == 1
    assert out == ""
    assert "No subcommand provided" in err


def test_unreadable_file_fails(capsys, tmp_path):
    code, out, err = run_main(capsys, [str(tmp_path / "missing.txt"), "sum"])

    assert code == 1
    assert out == ""
    assert "Could not open file" in err


def test_malformed_listing_aborts(capsys, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("5 a/x.txt\noops\n", encoding="utf-8")

    code, out, err = run_main(capsys, [str(path), "sum"])

    assert code == 1
    assert out == ""
    assert "line 2" in err


def test_dump_config(capsys):
    code, out, _ = run_main(capsys, ["--depth", "2", "--dump-config"])

    assert code == 0
    assert json.loads(out)["depth"] == 2


def test_config_file_supplies_defaults(capsys, tmp_path, listing_file):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"human": True, "file": str(listing_file)}), encoding="utf-8")

    code = main(["--config", str(config), "sum"])
    out, _ = capsys.readouterr()

    assert code == 0
    assert out == "15.00B\n"

# -----------------------------------------------------------------------------
# Query helpers
# -----------------------------------------------------------------------------

def test_build_tree_skips_empty_entries():
    listing = [ListingEntry(size=0, path="/empty"), ListingEntry(size=4, path="/full")]

    tree = build_tree(listing)

    assert [c.name for c in tree.children(None)] == ["full"]
    assert [c.name for c in build_tree(listing, skip_empty=False).children(None)] == ["empty", "full"]


def test_run_tree_applies_prefix_before_insertion(sample_listing, default_conf):
    default_conf["prefix"] = "/a"

    assert run_tree(sample_listing, default_conf) == ["a: 12.00B"]


def test_run_sum_formats_with_precision(sample_listing, default_conf):
    default_conf.update({"human": True, "size_precision": 1})

    assert run_sum(sample_listing, default_conf) == ["15.0B"]
