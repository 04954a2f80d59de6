from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
configuration hierarchy (defaults, user config file, CLI overrides), the
scan itself and the rendering of the tree on stdout. Diagnostics go to
stderr through logging so that stdout carries only the tree.
"""

import json
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from frisk.core.analysis.tree_builder import build_size_tree
from frisk.core.analysis.tree_renderer import print_tree
from frisk.core.validator import validate_config
from frisk.domain.config import get_default_config, load_config, merge_config
from frisk.domain.tree_models import RootScanError
from frisk.infra.fs import normalize_path
from frisk.infra.logging import LoggingConfig, configure_logging
from frisk.interface.cli import args as cli_args

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SCAN_ERROR = 2
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
        int: Process exit code (0 success, 2 unscannable root, 1 failure,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=cli_args.log_level_from_args(args),
        console=True,
        log_file=args.log_file,
    )
    configure_logging(logging_conf)

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve configuration (defaults vs user file) and merge overrides
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = merge_config(base_conf, cli_args.args_to_overrides(args))

    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Scan and render
    try:
        run_scan(conf)
    except RootScanError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_SCAN_ERROR
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user.")
        return EXIT_INTERRUPTED

    return EXIT_OK


def run_scan(conf: Dict[str, Any], stream: Optional[TextIO] = None) -> List[str]:
    """
    Build the size tree described by a validated configuration and print it.

    Args:
        conf: Normalized configuration (see validate_config).
        stream: Output stream. Defaults to stdout.

    Returns:
        List[str]: The printed lines.

    Raises:
        RootScanError: If the root cannot be scanned.
    """
    out = stream if stream is not None else sys.stdout
    path = normalize_path(conf["path"], ".")

    root = build_size_tree(path, mode=conf["mode"], max_workers=conf["workers"])

    color = conf["color"]
    if color is None:
        color = _stream_is_tty(out)

    return print_tree(
        root,
        depth_limit=conf["depth"],
        ignore_names=conf["ignore"],
        compact=conf["compact"],
        color=color,
        stream=out,
    )

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


if __name__ == "__main__":
    sys.exit(main())
