from __future__ import annotations

"""
Tree View Presentation Helpers.

Widget-free helpers used by the file manager frame to decide what each
tree row looks like: glyphs, indentation and the actions a row offers.
Kept free of Tk objects so they can be tested headless.
"""

from typing import List, Optional, Tuple

from webstager.core.tree.file_kinds import FileKind, classify_file
from webstager.domain import constants as const
from webstager.domain.tree_models import FolderNode, Node, UploadItem
from webstager.infra.fs import upload_items_from_paths

FOLDER_GLYPH = "📁"
CHEVRON_EXPANDED = "▾"
CHEVRON_COLLAPSED = "▸"

_KIND_GLYPHS = {
    FileKind.CODE: "</>",
    FileKind.IMAGE: "🖼",
    FileKind.TEXT: "📄",
    FileKind.GENERIC: "📎",
}

ROW_ACTIONS_FOLDER: Tuple[str, ...] = ("new_folder", "new_file", "upload", "delete")
ROW_ACTIONS_FILE: Tuple[str, ...] = ("delete",)


def node_glyph(node: Node) -> str:
    """Icon text shown before a node name."""
    if isinstance(node, FolderNode):
        return FOLDER_GLYPH
    return _KIND_GLYPHS[classify_file(node.name)]


def chevron_text(node: Node, expanded: bool) -> Optional[str]:
    """Expand/collapse arrow for folders; None for files."""
    if not isinstance(node, FolderNode):
        return None
    return CHEVRON_EXPANDED if expanded else CHEVRON_COLLAPSED


def row_padding(depth: int) -> int:
    """Left padding in pixels for a row at the given depth."""
    return depth * const.TREE_INDENT_PX + const.TREE_BASE_PAD_PX


def row_actions(node: Node) -> Tuple[str, ...]:
    return ROW_ACTIONS_FOLDER if isinstance(node, FolderNode) else ROW_ACTIONS_FILE


def selection_to_items(selection: object) -> List[UploadItem]:
    """
    Convert a file dialog selection into upload items.

    Tk returns a tuple of paths, or an empty string when the dialog is
    cancelled.

    Args:
        selection: Raw return value of askopenfilenames.

    Returns:
        List[UploadItem]: Items in selection order; empty on cancel.
    """
    if not selection or isinstance(selection, str):
        return []
    return upload_items_from_paths(str(p) for p in selection)
