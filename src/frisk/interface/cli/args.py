from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into configuration overrides. Every option defaults to None so
that unset flags never mask values from the configuration file.
"""

import argparse
from typing import Any, Dict, List, Optional

from frisk.domain.constants import APP_NAME, APP_VERSION
from frisk.domain.tree_models import ScanMode

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the frisk CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="General use directory size comparison and overview.",
    )

    # --- Scan Target ---
    p.add_argument(
        "-p", "--path",
        dest="path",
        default=None,
        help="Specify the path to frisk. (defaults to current working directory)",
    )

    # --- Rendering ---
    p.add_argument(
        "-d", "--depth",
        dest="depth",
        type=int,
        default=None,
        help="Limit the frisk directory depth. (defaults to -1, meaning no limit)",
    )
    p.add_argument(
        "-i", "--ignore",
        dest="ignore",
        default=None,
        help=(
            "Comma-separated list of file/directory names to ignore when printing "
            "out the result. (defaults to .git,node_modules)"
        ),
    )
    p.add_argument(
        "-c", "--compact",
        action="store_true",
        help="Print the output in a more horizontally compact way.",
    )
    color = p.add_mutually_exclusive_group()
    color.add_argument(
        "--color",
        dest="color",
        action="store_const",
        const=True,
        default=None,
        help="Always emit ANSI colors, even when stdout is not a terminal.",
    )
    color.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const=False,
        help="Never emit ANSI colors.",
    )

    # --- Scheduling ---
    p.add_argument(
        "--sequential",
        action="store_true",
        help="Walk the tree on a single thread instead of the worker pool.",
    )
    p.add_argument(
        "-w", "--workers",
        dest="workers",
        type=int,
        default=None,
        help="Worker pool size for the concurrent scan.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the user configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report scan progress on stderr.",
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["path"] = args.path
    overrides["depth"] = args.depth
    overrides["workers"] = args.workers
    overrides["color"] = args.color

    if args.ignore is not None:
        overrides["ignore"] = _split_csv(args.ignore)
    if args.compact:
        overrides["compact"] = True
    if args.sequential:
        overrides["mode"] = ScanMode.SEQUENTIAL.value

    return overrides


def log_level_from_args(args: argparse.Namespace) -> str:
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    return "WARNING"

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
