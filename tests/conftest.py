from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared forests, a deterministic id generator and a host stub that
   owns the forest the way the GUI and CLI do.
"""

import os
import sys
from typing import Any, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from webstager.core.editor.tree_editor import TreeEditor  # noqa: E402
from webstager.core.tree.identifiers import IdGenerator  # noqa: E402
from webstager.domain.tree_models import FileNode, FolderNode, Forest  # noqa: E402


def pytest_configure(config: Any) -> None:
    config.addinivalue_line("markers", "gui: tests for GUI glue code (no display required)")


# -----------------------------------------------------------------------------
# Host Stub
# -----------------------------------------------------------------------------
class RecordingHost:
    """Owns a forest, records every change and pushes it back to the editor."""

    def __init__(self, forest: Forest = ()):
        self.forest: Forest = forest
        self.changes: List[Forest] = []
        self.editor: Any = None

    def on_change(self, new_forest: Forest) -> None:
        self.changes.append(new_forest)
        self.forest = new_forest
        if self.editor is not None:
            self.editor.set_forest(new_forest)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def ids() -> IdGenerator:
    """Deterministic identifiers: n1, n2, ..."""
    return IdGenerator("counter")


@pytest.fixture
def sample_forest() -> Forest:
    """
    Return a small nested forest.

    Structure:
      assets/            (f-assets)
        img/             (f-img)
          logo.png       (x-logo)
        style.css        (x-style)
      index.html         (x-index)
    """
    img = FolderNode(id="f-img", name="img", children=(FileNode(id="x-logo", name="logo.png"),))
    assets = FolderNode(
        id="f-assets",
        name="assets",
        children=(img, FileNode(id="x-style", name="style.css")),
    )
    return (assets, FileNode(id="x-index", name="index.html"))


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def editor(host: RecordingHost, ids: IdGenerator) -> TreeEditor:
    """Editor wired to an empty recording host."""
    ed = TreeEditor(host.forest, host.on_change, ids)
    host.editor = ed
    return ed
