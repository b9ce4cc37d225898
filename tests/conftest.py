from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for the reference tree used across unit tests.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from compositree.core.analysis.tree_builder import add_child  # noqa: E402
from compositree.domain.tree_models import Composite, Leaf  # noqa: E402
from compositree.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    """Detach package handlers after each test so captured streams never leak."""
    yield
    shutdown_logging()


@pytest.fixture
def sample_tree() -> Composite:
    """
    Build the reference hierarchy.

    Structure:
    Root
      File1.txt
      Subdir1
        File2.txt
        Subdir2
          File3.txt
    """
    root = Composite("Root")
    add_child(root, Leaf("File1.txt"))

    subdir1 = Composite("Subdir1")
    add_child(root, subdir1)
    add_child(subdir1, Leaf("File2.txt"))

    subdir2 = Composite("Subdir2")
    add_child(subdir1, subdir2)
    add_child(subdir2, Leaf("File3.txt"))

    return root


@pytest.fixture
def sample_directory(tmp_path: Path) -> Path:
    """
    Create the reference hierarchy on disk.

    Structure:
    /Root
      File1.txt
      /Subdir1
        File2.txt
        /Subdir2
          File3.txt
    """
    root = tmp_path / "Root"
    subdir2 = root / "Subdir1" / "Subdir2"
    subdir2.mkdir(parents=True)

    (root / "File1.txt").write_text("one", encoding="utf-8")
    (root / "Subdir1" / "File2.txt").write_text("two", encoding="utf-8")
    (subdir2 / "File3.txt").write_text("three", encoding="utf-8")

    return root
