from __future__ import annotations

"""
Composite Tree Data Models.

Defines the two node variants of the hierarchy and the structural error
raised when an assembly operation would break the strict tree shape.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Leaf:
    """
    Terminal element of the hierarchy.

    Attributes:
        name: Display name of the node.
        parent: Owning composite, maintained by the assembly operations.
    """
    name: str
    parent: Optional[Composite] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        _check_name(self.name)

    @property
    def is_root(self) -> bool:
        return self.parent is None


@dataclass(eq=False)
class Composite:
    """
    Element owning an ordered sequence of child nodes.

    Children are attached exclusively through ``add_child`` so that the
    ownership back reference stays consistent with the ``children`` list.

    Attributes:
        name: Display name of the node.
        children: Child nodes in insertion order.
        parent: Owning composite, maintained by the assembly operations.
    """
    name: str
    children: List[Node] = field(default_factory=list, init=False)
    parent: Optional[Composite] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        _check_name(self.name)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_empty(self) -> bool:
        return not self.children


# Tagged variant over the two node kinds
Node = Union[Leaf, Composite]

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class StructuralViolationError(ValueError):
    """Raised when an operation would introduce a cycle or a shared child."""

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_name(name: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f"Node name must be str, received {type(name).__name__}.")
