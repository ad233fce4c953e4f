from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, config file, CLI overrides), listing ingestion, and dispatch of
the `sum` and `tree` queries. Query results go to stdout; diagnostics go to
stderr through the logging subsystem.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from rclonedirstat.core.analysis.aggregation_tree import AggregationTree
from rclonedirstat.core.analysis.tree_renderer import (
    filter_listing,
    render_size_tree,
    sum_under_prefix,
)
from rclonedirstat.core.services.config_validator import validate_config
from rclonedirstat.core.services.listing_parser import read_listing
from rclonedirstat.domain.config import get_default_config, load_config
from rclonedirstat.domain.exceptions import (
    DirStatError,
    ListingParseError,
    PathNotFoundError,
)
from rclonedirstat.domain.listing_models import ListingEntry
from rclonedirstat.infra.logging import LoggingConfig, configure_logging, get_logger
from rclonedirstat.interface.cli import args as cli_args
from rclonedirstat.utils.size_format import format_size

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    args = cli_args.parse_cli_args(argv)

    # 2. Resolve configuration (defaults < config file < CLI flags)
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=conf["log_level"],
        console=True,
        log_file=conf["log_file"] or None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.command is None:
        logger.error("No subcommand provided")
        print("No subcommand provided", file=sys.stderr)
        return EXIT_FAILURE

    # 4. Listing ingestion (strict) and query dispatch
    try:
        listing = read_listing(conf["file"])
        if args.command == cli_args.COMMAND_SUM:
            output = run_sum(listing, conf)
        else:
            output = run_tree(listing, conf)
    except ListingParseError as e:
        logger.error(f"Aborting on malformed input: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except DirStatError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

    for line in output:
        print(line)
    return EXIT_OK

# -----------------------------------------------------------------------------
# QUERIES
# -----------------------------------------------------------------------------

def run_sum(listing: List[ListingEntry], conf: Dict[str, Any]) -> List[str]:
    """Total the sizes of the entries under the configured prefix."""
    total = sum_under_prefix(listing, conf["prefix"])
    logger.debug(f"Sum under prefix {conf['prefix']!r}: {total} bytes")
    if conf["human"]:
        return [format_size(total, conf["size_precision"])]
    return [str(total)]


def run_tree(listing: List[ListingEntry], conf: Dict[str, Any]) -> List[str]:
    """
    Build the aggregation tree from the filtered listing and render it.

    Sizes in the tree are always human-readable. Zero-byte entries are
    skipped when `skip_empty_in_tree` is set.
    """
    tree = build_tree(
        filter_listing(listing, conf["prefix"]),
        skip_empty=conf["skip_empty_in_tree"],
        propagate_invalidation=conf["propagate_invalidation"],
    )

    try:
        roots = tree.children(None)
    except PathNotFoundError as e:
        logger.warning(f"Nothing to render: {e}")
        return []

    precision = conf["size_precision"]
    return render_size_tree(
        roots,
        max_depth=conf["depth"],
        formatter=lambda n: format_size(n, precision),
    )


def build_tree(
        listing: List[ListingEntry],
        skip_empty: bool = True,
        propagate_invalidation: bool = False,
) -> AggregationTree[int]:
    """Insert every listing entry into a fresh aggregation tree."""
    tree: AggregationTree[int] = AggregationTree(propagate_invalidation=propagate_invalidation)
    for entry in listing:
        if skip_empty and entry.size <= 0:
            continue
        tree.insert(entry.path, entry.size)
    logger.info(f"Aggregation tree built from {len(tree)} paths.")
    return tree

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides of known keys into the base config.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
