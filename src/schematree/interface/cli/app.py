from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, JSON file, command-line overrides), tree construction and result
rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from schematree.core.tree_builder import build_tree, read_paths, save_tree_to_disk
from schematree.core.tree_renderer import render_tree, tree_to_dict
from schematree.core.validator import validate_config
from schematree.domain.config import DEFAULT_LOG_LEVEL, load_config
from schematree.domain.errors import InvalidPathError
from schematree.infra.logging import LoggingConfig, configure_logging, get_logger
from schematree.interface.cli import args as cli_args

logger = get_logger(__name__)

STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 invalid path, 2 unreadable input).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap at the default level so config loading is reported
    bootstrap_level = "DEBUG" if args.debug else DEFAULT_LOG_LEVEL
    configure_logging(LoggingConfig(level=bootstrap_level, console=True))

    # 2. Configuration hierarchy
    base_conf = load_config(args.config_path or "")
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Final logging setup (console plus optional rotating file)
    configure_logging(
        LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"] or None),
        force=True,
    )

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Input collection
    input_path = conf["input_path"]
    lines: List[str] = []
    if input_path == STDIN_MARKER:
        lines.extend(sys.stdin.read().splitlines())
    elif input_path:
        if not os.path.exists(input_path):
            return _input_error(f"Input file does not exist: {input_path}")
        try:
            lines.extend(read_paths(input_path))
        except (OSError, UnicodeDecodeError) as e:
            return _input_error(f"Cannot read input file '{input_path}': {e}")
    lines.extend(args.paths)

    # 5. Tree construction
    try:
        root = build_tree(lines, skip_blank=conf["skip_blank"])
    except InvalidPathError as e:
        logger.critical(f"Invalid path {e.path!r}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info(f"Namespace tree built: {len(root.top_level)} top-level, {len(root)} total nodes")

    # 6. Output rendering
    rendered = render_tree(root)
    if conf["output_path"]:
        save_tree_to_disk(conf["output_path"], rendered)

    if conf["print_tree"]:
        if conf["json_output"]:
            print(json.dumps(tree_to_dict(root), ensure_ascii=False, indent=2))
        else:
            for line in rendered:
                print(line)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


def _input_error(msg: str) -> int:
    """Report an unusable input file and return its exit code."""
    logger.error(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    sys.exit(main())
