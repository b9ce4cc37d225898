from __future__ import annotations

"""
Unit tests for the name filtering engine.
"""

from compositree.core.filters import compile_patterns, default_exclude_patterns, matches_any


def test_compile_patterns_discards_malformed_regex():
    compiled = compile_patterns([r"^build$", r"([unclosed"])

    assert len(compiled) == 1
    assert compiled[0].pattern == r"^build$"


def test_default_exclusions_cover_common_noise():
    rx = compile_patterns(default_exclude_patterns())

    assert matches_any("__pycache__", rx)
    assert matches_any(".git", rx)
    assert matches_any("module.pyc", rx)
    assert not matches_any("File1.txt", rx)
    assert not matches_any(".gitignore", rx)
