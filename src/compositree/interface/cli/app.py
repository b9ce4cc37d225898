from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, persisted session, CLI overrides), tree loading and
rendering, and result output.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from compositree.core.analysis.tree_service import generate_tree_lines, load_tree
from compositree.core.validator import validate_config
from compositree.domain.config import get_default_config, load_config, save_config
from compositree.domain.tree_models import StructuralViolationError
from compositree.infra.fs import normalize_path
from compositree.infra.logging import LoggingConfig, configure_logging, get_logger
from compositree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 2
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
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs persisted session)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    clean_conf["input_path"] = normalize_path(clean_conf["input_path"], os.getcwd())

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.remember:
        save_config(clean_conf)

    # 5. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not os.path.exists(input_path):
        msg = f"Input path does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_MISSING_INPUT

    # 6. Load and render
    try:
        root = load_tree(
            input_path,
            exclude_patterns=clean_conf["exclude_patterns"],
            directories_only=clean_conf["directories_only"],
        )
        lines = generate_tree_lines(
            root,
            style=clean_conf["style"],
            start_depth=clean_conf["start_depth"],
            step=clean_conf["step"],
            marker=clean_conf["indent_marker"],
            print_to_log=clean_conf["print_tree"],
            save_path=args.save_path or "",
        )
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except (StructuralViolationError, ValueError, OSError) as e:
        logger.error(f"Tree generation failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output phase
    for line in lines:
        print(line)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged; None values never replace base values.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "input_path", "exclude_patterns", "directories_only",
        "style", "start_depth", "step", "indent_marker", "print_tree",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
