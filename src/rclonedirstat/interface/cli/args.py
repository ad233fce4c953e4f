from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema: the `[file] [prefix] {sum,tree}`
operands and the rendering and diagnostic flags. Flags may appear anywhere
between the operands. Raw argparse namespaces are translated into
configuration overrides so that unset flags never mask values from the
config file.
"""

import argparse
from typing import Any, Dict, List, Optional

from rclonedirstat.infra.logging import get_default_log_path

COMMAND_SUM = "sum"
COMMAND_TREE = "tree"
COMMANDS = (COMMAND_SUM, COMMAND_TREE)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rclonedirstat CLI.

    The operands are collected into a single list and split by
    `parse_cli_args`, since argparse cannot place optional positionals in
    front of a command when flags sit in between.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rclonedirstat",
        description="Prints the sizes of a directory tree.",
        epilog=(
            "commands: 'sum' prints the sum of the sizes of the files, "
            "'tree' prints the directory tree."
        ),
    )
    p.add_argument("--version", action="version", version="%(prog)s 0.1.0")

    # --- Operands ---
    p.add_argument(
        "operands",
        nargs="*",
        metavar="[file] [prefix] {sum,tree}",
        help="Listing file ('-' reads standard input), path prefix, and command.",
    )

    # --- Query Options ---
    p.add_argument(
        "--depth",
        type=_non_negative_int,
        default=None,
        help="The depth of the tree to unfold (default: 0).",
    )
    p.add_argument(
        "--human",
        action="store_true",
        default=None,
        help="Prints the sizes in human-readable format.",
    )
    p.add_argument(
        "--propagate-invalidation",
        dest="propagate_invalidation",
        action="store_true",
        default=None,
        help="Invalidate every ancestor directory on insertion.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Read defaults from this JSON file instead of the user config.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the user config file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=get_default_log_path(),
        default=None,
        help="Also write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p


def parse_cli_args(
        argv: Optional[List[str]] = None,
        parser: Optional[argparse.ArgumentParser] = None,
) -> argparse.Namespace:
    """
    Parse the command line and split the operands.

    A trailing `sum` or `tree` operand is the command; the operands before
    it are the file and the prefix, in that order. Without a command all
    operands are taken as file and prefix and `command` is None.

    Args:
        argv: Argument list; defaults to sys.argv[1:].
        parser: Parser to use; defaults to `build_parser()`.

    Returns:
        argparse.Namespace: Parsed arguments with `file`, `prefix` and
                            `command` attributes.
    """
    p = parser or build_parser()
    args = p.parse_intermixed_args(argv)

    operands: List[str] = list(args.operands)
    command: Optional[str] = None
    if operands and operands[-1] in COMMANDS:
        command = operands.pop()

    if len(operands) > 2:
        p.error(f"unexpected operands: {' '.join(operands[2:])}")

    args.file = operands[0] if len(operands) > 0 else None
    args.prefix = operands[1] if len(operands) > 1 else None
    args.command = command
    return args

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only values explicitly given on the command line are returned.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in ("file", "prefix", "depth", "log_file"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value

    for flag in ("human", "propagate_invalidation"):
        if getattr(args, flag, None):
            overrides[flag] = True

    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    """argparse type accepting integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, received {number}")
    return number
