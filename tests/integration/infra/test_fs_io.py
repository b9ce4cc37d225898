from __future__ import annotations

"""
Integration tests for the FileSystem layer.

Verifies path normalization, user data directory resolution and safe
persistence of rendered lines.
"""

import os
from pathlib import Path
from unittest.mock import patch

from compositree.infra.fs import get_user_data_dir, normalize_path, save_lines


def test_normalize_path_fallback_and_expansion(tmp_path: Path) -> None:
    assert normalize_path("", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)

    with patch.dict(os.environ, {"TREE_HOME": str(tmp_path)}):
        assert normalize_path("$TREE_HOME/sub", "/unused") == os.path.join(str(tmp_path), "sub")


def test_user_data_dir_is_created(tmp_path: Path) -> None:
    with patch("os.path.expanduser", return_value=str(tmp_path)):
        path = get_user_data_dir()

    assert path == os.path.join(str(tmp_path), ".compositree")
    assert os.path.isdir(path)


def test_save_lines_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "nested" / "tree.txt"

    assert save_lines(str(target), ["-Root", "---leaf"]) is True
    assert target.read_text(encoding="utf-8") == "-Root\n---leaf\n"


def test_save_lines_reports_failure(tmp_path: Path) -> None:
    # A directory cannot be opened as a file
    assert save_lines(str(tmp_path), ["x"]) is False
