from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies the pre-order indent view (line count, ordering, indentation
step), the ASCII connector view and the JSON view.
"""

import json

import pytest

from compositree.core.analysis.tree_builder import add_child, build_from_mapping, iter_preorder
from compositree.core.analysis.tree_renderer import node_to_dict, render, render_ascii, render_json
from compositree.domain.tree_models import Composite, Leaf


def _indent_of(line: str, marker: str = "-") -> int:
    return len(line) - len(line.lstrip(marker))


# -----------------------------------------------------------------------------
# Indent view
# -----------------------------------------------------------------------------

def test_render_reference_tree(sample_tree):
    assert render(sample_tree, depth=1, step=2) == [
        "-Root",
        "---File1.txt",
        "---Subdir1",
        "-----File2.txt",
        "-----Subdir2",
        "-------File3.txt",
    ]


def test_render_leaf_is_single_line():
    assert render(Leaf("note.md"), depth=3) == ["---note.md"]


def test_render_empty_composite_is_single_line():
    assert render(Composite("empty"), depth=0) == ["empty"]


def test_line_count_matches_node_count(sample_tree):
    lines = render(sample_tree)
    assert len(lines) == sum(1 for _ in iter_preorder(sample_tree))


def test_child_lines_are_one_step_deeper(sample_tree):
    step = 3
    lines = render(sample_tree, depth=0, step=step)
    nodes = list(iter_preorder(sample_tree))

    indent_by_node = {id(node): _indent_of(line) for (node, _), line in zip(nodes, lines)}
    for node, _ in nodes:
        if node.parent is not None:
            assert indent_by_node[id(node)] == indent_by_node[id(node.parent)] + step


def test_parent_precedes_descendants_and_siblings_keep_order():
    root = Composite("root")
    for name in ("zeta", "alpha", "mid"):
        folder = Composite(name)
        add_child(root, folder)
        add_child(folder, Leaf(f"{name}.txt"))

    lines = render(root, depth=0, step=1, marker=".")

    assert lines == [
        "root",
        ".zeta",
        "..zeta.txt",
        ".alpha",
        "..alpha.txt",
        ".mid",
        "..mid.txt",
    ]


def test_render_custom_marker(sample_tree):
    lines = render(sample_tree, depth=0, step=1, marker="  ")
    assert lines[0] == "Root"
    assert lines[-1] == "      File3.txt"


def test_render_handles_very_deep_trees():
    root = Composite("n0")
    current = root
    for i in range(1, 3000):
        nxt = Composite(f"n{i}")
        add_child(current, nxt)
        current = nxt

    lines = render(root, depth=0, step=1)

    assert len(lines) == 3000
    assert lines[-1] == "-" * 2999 + "n2999"


def test_render_escapes_line_breaks_in_names():
    root = Composite("multi\nline")
    add_child(root, Leaf("carriage\rreturn"))

    lines = render(root, depth=0, step=1)

    assert lines == ["multi\\nline", "-carriage\\rreturn"]


@pytest.mark.parametrize(
    "kwargs",
    [{"depth": -1}, {"step": 0}, {"marker": ""}, {"marker": "\n"}, {"marker": "-\r"}],
)
def test_render_rejects_invalid_parameters(sample_tree, kwargs):
    with pytest.raises(ValueError):
        render(sample_tree, **kwargs)


def test_render_whitespace_marker_keeps_one_line_per_node(sample_tree):
    lines = render(sample_tree, marker="\t")

    assert len(lines) == len(list(iter_preorder(sample_tree)))
    assert lines[0] == "\tRoot"


# -----------------------------------------------------------------------------
# ASCII view
# -----------------------------------------------------------------------------

def test_render_ascii_connectors(sample_tree):
    assert render_ascii(sample_tree) == [
        "Root",
        "├── File1.txt",
        "└── Subdir1",
        "    ├── File2.txt",
        "    └── Subdir2",
        "        └── File3.txt",
    ]


def test_render_ascii_keeps_guides_for_open_branches():
    root = build_from_mapping({
        "name": "top",
        "children": [
            {"name": "a", "children": [{"name": "a1"}]},
            {"name": "b"},
        ],
    })

    assert render_ascii(root) == [
        "top",
        "├── a",
        "│   └── a1",
        "└── b",
    ]


def test_render_ascii_single_node():
    assert render_ascii(Leaf("solo")) == ["solo"]


# -----------------------------------------------------------------------------
# JSON view
# -----------------------------------------------------------------------------

def test_node_to_dict_shape(sample_tree):
    data = node_to_dict(sample_tree)

    assert data["name"] == "Root"
    assert data["type"] == "composite"
    assert data["children"][0] == {"name": "File1.txt", "type": "leaf"}
    assert data["children"][1]["children"][1]["children"][0]["name"] == "File3.txt"


def test_render_json_can_be_loaded_back(sample_tree):
    rebuilt = build_from_mapping(json.loads(render_json(sample_tree)))

    assert render(rebuilt) == render(sample_tree)
