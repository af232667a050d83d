from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies connectors, insertion order and collapsed folders.
"""

from webstager.core.tree.renderer import forest_to_lines, render_forest
from webstager.domain.tree_models import FileNode


def test_render_full_forest(sample_forest) -> None:
    assert forest_to_lines(sample_forest) == [
        "├── assets/",
        "│   ├── img/",
        "│   │   └── logo.png",
        "│   └── style.css",
        "└── index.html",
    ]


def test_render_keeps_insertion_order() -> None:
    forest = (FileNode(id="1", name="z.txt"), FileNode(id="2", name="a.txt"))
    assert forest_to_lines(forest) == ["├── z.txt", "└── a.txt"]


def test_render_respects_expanded_set(sample_forest) -> None:
    lines = forest_to_lines(sample_forest, expanded={"f-assets"})
    assert lines == [
        "├── assets/",
        "│   ├── img/",
        "│   └── style.css",
        "└── index.html",
    ]

    collapsed = forest_to_lines(sample_forest, expanded=set())
    assert collapsed == ["├── assets/", "└── index.html"]


def test_render_appends_to_accumulator() -> None:
    lines = ["header"]
    render_forest((FileNode(id="1", name="a"),), lines, prefix="  ")
    assert lines == ["header", "  └── a"]


def test_render_empty_forest() -> None:
    assert forest_to_lines(()) == []
