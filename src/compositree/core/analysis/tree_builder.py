from __future__ import annotations

"""
Tree Assembly Operations.

Attaches and detaches nodes while enforcing the strict tree invariant:
no node is its own ancestor and every attached node has exactly one
parent. Also builds complete hierarchies from nested mappings (JSON tree
documents) and from filesystem directories.
"""

import logging
import os
from typing import Any, Dict, Iterator, List, Optional, Tuple

from compositree.core.filters import compile_patterns, default_exclude_patterns, matches_any
from compositree.domain.tree_models import Composite, Leaf, Node, StructuralViolationError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API (ASSEMBLY)
# -----------------------------------------------------------------------------

def add_child(parent: Composite, child: Node) -> None:
    """
    Append a node to the ordered children of a composite.

    All checks run before any mutation, so a rejected call leaves the tree
    exactly as it was.

    Args:
        parent: Composite receiving the child.
        child: Leaf or Composite to attach.

    Raises:
        TypeError: If parent is not a Composite or child is not a Node.
        StructuralViolationError: If the child is the parent itself, one of
            its ancestors, or already attached to another parent.
    """
    if not isinstance(parent, Composite):
        raise TypeError(f"Cannot add children to {type(parent).__name__}: expected Composite.")
    if not isinstance(child, (Leaf, Composite)):
        raise TypeError(f"Invalid child type: {type(child).__name__}.")

    if is_ancestor(child, parent):
        raise StructuralViolationError(
            f"Cannot add '{child.name}' under '{parent.name}': it would become its own descendant."
        )
    if child.parent is not None:
        raise StructuralViolationError(
            f"Node '{child.name}' is already a child of '{child.parent.name}'."
        )

    parent.children.append(child)
    child.parent = parent
    logger.debug(f"Attached '{child.name}' to '{parent.name}'")


def remove_child(parent: Composite, child: Node) -> None:
    """
    Detach a direct child from a composite.

    Args:
        parent: Current owner of the child.
        child: Node to detach (matched by identity).

    Raises:
        StructuralViolationError: If child is not a direct child of parent.
    """
    for index, candidate in enumerate(parent.children):
        if candidate is child:
            del parent.children[index]
            child.parent = None
            logger.debug(f"Detached '{child.name}' from '{parent.name}'")
            return

    raise StructuralViolationError(f"Node '{child.name}' is not a child of '{parent.name}'.")


def is_ancestor(candidate: Node, node: Node) -> bool:
    """
    Check whether candidate is node itself or lies on its ancestor chain.

    Args:
        candidate: Possible ancestor.
        node: Node whose parent chain is walked.

    Returns:
        bool: True if candidate is node or one of its ancestors.
    """
    current: Optional[Node] = node
    while current is not None:
        if current is candidate:
            return True
        current = current.parent
    return False

# -----------------------------------------------------------------------------
# PUBLIC API (TRAVERSAL)
# -----------------------------------------------------------------------------

def iter_preorder(node: Node) -> Iterator[Tuple[Node, int]]:
    """
    Yield every node of the subtree with its nesting level, parent first.

    Args:
        node: Subtree root (level 0).

    Yields:
        Tuple[Node, int]: The node and its distance from the subtree root.
    """
    stack: List[Tuple[Node, int]] = [(node, 0)]
    while stack:
        current, level = stack.pop()
        yield current, level
        if isinstance(current, Composite):
            # Reversed push keeps siblings in insertion order
            for child in reversed(current.children):
                stack.append((child, level + 1))


def count_nodes(node: Node) -> int:
    """Count the nodes of a subtree, root included."""
    return sum(1 for _ in iter_preorder(node))

# -----------------------------------------------------------------------------
# PUBLIC API (BUILDERS)
# -----------------------------------------------------------------------------

def build_from_mapping(data: Dict[str, Any]) -> Node:
    """
    Build a tree from a nested mapping, usually a decoded JSON document.

    A mapping with a ``children`` list becomes a Composite, any other mapping
    with a ``name`` becomes a Leaf.

    Args:
        data: Mapping of the form {"name": str, "children": [...]}.

    Returns:
        Node: Root of the assembled tree.

    Raises:
        ValueError: If an entry is not a mapping, lacks a string name, or
            carries a non-list ``children`` value.
    """
    return _node_from_mapping(data, "$")


def build_from_directory(
        input_path: str,
        exclude_patterns: Optional[List[str]] = None,
        directories_only: bool = False,
) -> Composite:
    """
    Build a tree mirroring a directory on disk.

    Inside each directory, files come first and subdirectories second, each
    group sorted by name.

    Args:
        input_path: Directory to scan.
        exclude_patterns: Regexes for names to skip. Defaults to the
            system-level exclusions.
        directories_only: If True, files are not added as leaves.

    Returns:
        Composite: Root node named after the scanned directory.

    Raises:
        NotADirectoryError: If input_path is not an existing directory.
    """
    base = os.path.abspath(input_path)
    if not os.path.isdir(base):
        raise NotADirectoryError(f"Not a directory: {input_path}")

    patterns = exclude_patterns if exclude_patterns is not None else default_exclude_patterns()
    exclude_rx = compile_patterns(patterns)

    root = Composite(name=os.path.basename(base) or base)
    folders: Dict[str, Composite] = {base: root}

    for current, dirs, files in os.walk(base):
        # In-place modification of dirs prunes the walk
        dirs[:] = sorted(d for d in dirs if not matches_any(d, exclude_rx))
        folder = folders[current]

        if not directories_only:
            for file_name in sorted(files):
                if matches_any(file_name, exclude_rx):
                    continue
                add_child(folder, Leaf(name=file_name))

        for dir_name in dirs:
            sub = Composite(name=dir_name)
            add_child(folder, sub)
            folders[os.path.join(current, dir_name)] = sub

    logger.debug(f"Scanned '{base}' into {count_nodes(root)} nodes")
    return root

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _node_from_mapping(data: Any, location: str) -> Node:
    """Recursively convert one mapping entry, tracking its location for errors."""
    if not isinstance(data, dict):
        raise ValueError(f"Invalid node at {location}: expected object, received {type(data).__name__}.")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f"Invalid node at {location}: 'name' must be a non-empty string.")

    if "children" not in data:
        return Leaf(name=name)

    children = data["children"]
    if not isinstance(children, list):
        raise ValueError(f"Invalid node at {location}: 'children' must be a list.")

    composite = Composite(name=name)
    for i, child_data in enumerate(children):
        add_child(composite, _node_from_mapping(child_data, f"{location}.children[{i}]"))
    return composite
