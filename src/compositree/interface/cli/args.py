from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from compositree.domain.constants import RENDER_STYLES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the compositree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="compositree",
        description="Render a directory or a JSON tree document as a pre-order tree.",
    )

    # --- Source ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Directory to scan or .json tree document (default: current directory).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes for names to skip while scanning.",
    )
    p.add_argument(
        "--dirs-only",
        action="store_true",
        help="Only include directories when scanning.",
    )

    # --- Rendering ---
    p.add_argument(
        "--style",
        choices=list(RENDER_STYLES),
        default=None,
        help="Output style (default: indent).",
    )
    p.add_argument(
        "--start-depth",
        dest="start_depth",
        type=int,
        default=None,
        help="Indent markers on the root line.",
    )
    p.add_argument(
        "--step",
        type=int,
        default=None,
        help="Extra indent markers per nesting level.",
    )
    p.add_argument(
        "--marker",
        dest="indent_marker",
        default=None,
        help="Indent marker string.",
    )

    # --- Output ---
    p.add_argument(
        "--save",
        dest="save_path",
        default=None,
        help="Also write the rendered tree to this file.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Log the rendered tree at INFO level.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved session configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--remember",
        action="store_true",
        help="Persist the effective configuration as the next session default.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write a rotating diagnostic log to this file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Unset options map to None so they never shadow the base configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "style": args.style,
        "start_depth": args.start_depth,
        "step": args.step,
        "indent_marker": args.indent_marker,
        "exclude_patterns": _split_csv(args.exclude_patterns),
    }

    if args.dirs_only:
        overrides["directories_only"] = True
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
