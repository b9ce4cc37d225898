from __future__ import annotations

"""
Compositree: named hierarchies built with the Composite pattern.

Exposes the tree model, the assembly operations and the renderers as the
public API of the package.
"""

from compositree.core.analysis.tree_builder import (
    add_child,
    build_from_directory,
    build_from_mapping,
    count_nodes,
    is_ancestor,
    iter_preorder,
    remove_child,
)
from compositree.core.analysis.tree_renderer import (
    node_to_dict,
    render,
    render_ascii,
    render_json,
)
from compositree.domain.tree_models import (
    Composite,
    Leaf,
    Node,
    StructuralViolationError,
)

__version__ = "1.0.0"

__all__ = [
    "Composite",
    "Leaf",
    "Node",
    "StructuralViolationError",
    "add_child",
    "remove_child",
    "is_ancestor",
    "iter_preorder",
    "count_nodes",
    "build_from_mapping",
    "build_from_directory",
    "render",
    "render_ascii",
    "render_json",
    "node_to_dict",
]
