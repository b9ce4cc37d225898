from __future__ import annotations

"""
Tree Service.

Loads a tree from an input path (directory or JSON tree document) and
renders it in the requested style, optionally logging the preview and
persisting the output. This service does NOT print to stdout.
"""

import json
import logging
import os
from typing import List, Optional

from compositree.core.analysis.tree_builder import (
    build_from_directory,
    build_from_mapping,
    count_nodes,
)
from compositree.core.analysis.tree_renderer import render, render_ascii, render_json
from compositree.domain.constants import (
    DEFAULT_INDENT_MARKER,
    DEFAULT_START_DEPTH,
    DEFAULT_STEP,
    STYLE_ASCII,
    STYLE_INDENT,
    STYLE_JSON,
)
from compositree.domain.tree_models import Node
from compositree.infra.fs import save_lines

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_tree(
        input_path: str,
        exclude_patterns: Optional[List[str]] = None,
        directories_only: bool = False,
) -> Node:
    """
    Build a tree from a directory or from a JSON tree document.

    Args:
        input_path: Directory to scan, or a ``.json`` file holding a nested
            {"name", "children"} document.
        exclude_patterns: Name exclusion regexes (directory scans only).
        directories_only: Skip files when scanning a directory.

    Returns:
        Node: Root of the loaded tree.

    Raises:
        FileNotFoundError: If input_path does not exist.
        ValueError: If the file is not a JSON document or is malformed.
    """
    if not os.path.exists(input_path):
        raise FileNotFoundError(f"Input path does not exist: {input_path}")

    if os.path.isdir(input_path):
        logger.info(f"Building tree from directory: {input_path}")
        return build_from_directory(
            input_path,
            exclude_patterns=exclude_patterns,
            directories_only=directories_only,
        )

    if not input_path.lower().endswith(".json"):
        raise ValueError(f"Unsupported input file '{input_path}': expected a directory or a .json document.")

    logger.info(f"Building tree from document: {input_path}")
    with open(input_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed tree document '{input_path}': {e}") from e

    return build_from_mapping(data)


def generate_tree_lines(
        root: Node,
        style: str = STYLE_INDENT,
        start_depth: int = DEFAULT_START_DEPTH,
        step: int = DEFAULT_STEP,
        marker: str = DEFAULT_INDENT_MARKER,
        print_to_log: bool = False,
        save_path: str = "",
) -> List[str]:
    """
    Render a tree and handle the optional preview and persistence.

    Args:
        root: Tree to render.
        style: One of "indent", "ascii" or "json".
        start_depth: Indent markers on the root line (indent style).
        step: Extra markers per nesting level (indent style).
        marker: Indent marker string (indent style).
        print_to_log: Whether to log the output at INFO level.
        save_path: Optional file path to persist the lines.

    Returns:
        List[str]: Rendered lines.

    Raises:
        ValueError: On an unknown style or invalid indent parameters.
        OSError: If save_path was given and the file could not be written.
    """
    if style == STYLE_INDENT:
        lines = render(root, depth=start_depth, step=step, marker=marker)
    elif style == STYLE_ASCII:
        lines = render_ascii(root)
    elif style == STYLE_JSON:
        lines = render_json(root).splitlines()
    else:
        raise ValueError(f"Unknown render style: {style}")

    logger.debug(f"Rendered {count_nodes(root)} nodes as '{style}' ({len(lines)} lines)")

    if print_to_log:
        logger.info("Tree Preview:\n" + "\n".join(lines))

    if save_path and not save_lines(save_path, lines):
        raise OSError(f"Could not write tree to '{save_path}'.")

    return lines
