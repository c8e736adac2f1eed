from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the schematree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="schematree",
        description="Build a namespace tree from dotted schema paths and print it.",
    )

    # --- Input ---
    p.add_argument(
        "paths",
        nargs="*",
        help="Dotted paths to resolve in addition to the input file.",
    )
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="File with one dotted path per line ('-' reads stdin).",
    )
    p.add_argument(
        "--keep-blank",
        action="store_true",
        help="Do not skip blank lines and '#' comments in the input.",
    )

    # --- Output ---
    p.add_argument(
        "--tree-file",
        dest="output_path",
        default=None,
        help="Save the rendered tree to this file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the tree as nested JSON instead of ASCII.",
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the tree to stdout.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file merged over the defaults.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only options that were actually given end up in the result, so they can
    be layered over file-based configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.input_path is not None:
        overrides["input_path"] = args.input_path
    if args.output_path is not None:
        overrides["output_path"] = args.output_path
    if args.log_file is not None:
        overrides["log_file"] = args.log_file

    if args.keep_blank:
        overrides["skip_blank"] = False
    if args.json_output:
        overrides["json_output"] = True
    if args.quiet:
        overrides["print_tree"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
