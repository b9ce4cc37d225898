from __future__ import annotations

"""
Tree Renderer.

Converts Composite trees into text. The indent view prefixes every node
with depth-many markers, the ASCII view draws connectors (├──, └──), and
the JSON view serializes the hierarchy. All views are pre-order and keep
children in insertion order.
"""

import json
from typing import Any, Dict, List, Tuple

from compositree.domain.constants import (
    DEFAULT_INDENT_MARKER,
    DEFAULT_START_DEPTH,
    DEFAULT_STEP,
    NODE_TYPE_COMPOSITE,
    NODE_TYPE_LEAF,
)
from compositree.domain.tree_models import Composite, Leaf, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render(
        node: Node,
        depth: int = DEFAULT_START_DEPTH,
        step: int = DEFAULT_STEP,
        marker: str = DEFAULT_INDENT_MARKER,
) -> List[str]:
    """
    Render a subtree as indented lines, one per node, in pre-order.

    A leaf yields ``marker * depth + name``. A composite yields its own line
    followed by each child rendered at ``depth + step``. Traversal uses an
    explicit stack, so arbitrarily deep trees render without recursion.

    Args:
        node: Subtree root.
        depth: Indent markers on the root line.
        step: Extra markers per nesting level.
        marker: Indent marker string.

    Returns:
        List[str]: Rendered lines.

    Raises:
        ValueError: If depth is negative, step is below 1, or marker is empty
            or contains a line break.
    """
    _check_render_params(depth, step, marker)

    lines: List[str] = []
    stack: List[Tuple[Node, int]] = [(node, depth)]

    while stack:
        current, level = stack.pop()
        match current:
            case Leaf(name=name):
                lines.append(_format_line(name, level, marker))
            case Composite(name=name, children=children):
                lines.append(_format_line(name, level, marker))
                # Reversed push keeps siblings in insertion order
                for child in reversed(children):
                    stack.append((child, level + step))
            case _:
                raise TypeError(f"Cannot render object of type {type(current).__name__}.")

    return lines


def render_ascii(node: Node) -> List[str]:
    """
    Render a subtree with standard ASCII connectors.

    The root line carries no connector; descendants use ├── / └── and
    inherit │ guides from open ancestors.

    Args:
        node: Subtree root.

    Returns:
        List[str]: Rendered lines.
    """
    lines: List[str] = [_escape_name(node.name)]
    stack: List[Tuple[Node, str, bool]] = []
    _push_children(stack, node, "")

    while stack:
        current, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_escape_name(current.name)}")
        _push_children(stack, current, prefix + ("    " if is_last else "│   "))

    return lines


def node_to_dict(node: Node) -> Dict[str, Any]:
    """
    Convert a subtree to a JSON-serializable dictionary.

    Leaves carry no ``children`` key, so the output can be fed back to
    ``build_from_mapping``.
    """
    match node:
        case Leaf(name=name):
            return {"name": name, "type": NODE_TYPE_LEAF}
        case Composite(name=name, children=children):
            return {
                "name": name,
                "type": NODE_TYPE_COMPOSITE,
                "children": [node_to_dict(child) for child in children],
            }
        case _:
            raise TypeError(f"Cannot serialize object of type {type(node).__name__}.")


def render_json(node: Node, indent: int = 2) -> str:
    """Render a subtree as a JSON document."""
    return json.dumps(node_to_dict(node), ensure_ascii=False, indent=indent)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_render_params(depth: int, step: int, marker: str) -> None:
    """Reject parameters that would break the one-step-per-level layout."""
    if depth < 0:
        raise ValueError(f"Invalid depth {depth}: must be >= 0.")
    if step < 1:
        raise ValueError(f"Invalid step {step}: must be >= 1.")
    if not marker:
        raise ValueError("Indent marker must be a non-empty string.")
    if "\n" in marker or "\r" in marker:
        raise ValueError("Indent marker must not contain line breaks.")


def _format_line(name: str, depth: int, marker: str) -> str:
    return f"{marker * depth}{_escape_name(name)}"


def _escape_name(name: str) -> str:
    # One node, one line
    return name.replace("\r", "\\r").replace("\n", "\\n")


def _push_children(stack: List[Tuple[Node, str, bool]], node: Node, prefix: str) -> None:
    """Queue the children of a composite so they pop in insertion order."""
    if not isinstance(node, Composite):
        return
    total = len(node.children)
    for i in reversed(range(total)):
        stack.append((node.children[i], prefix, i == total - 1))
