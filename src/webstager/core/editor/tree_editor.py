from __future__ import annotations

"""
Staging Tree Editor.

Stateful shell around the pure forest operations. The host owns the
forest: each successful user action produces a new forest that the
editor keeps working on and reports through a single change callback.
The host may replace it at any time with `set_forest`. Expanded folders
and dialog contents are local display state that never leaves the editor.
"""

import logging
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from webstager.core.editor.dialogs import CreateDialogState, DeleteDialogState
from webstager.core.tree import operations
from webstager.core.tree.identifiers import IdGenerator
from webstager.core.tree.queries import collect_ids, find_node
from webstager.domain.edit_models import EditResult
from webstager.domain.tree_models import FolderNode, Forest, Node, NodeKind, UploadItem

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Forest], None]

# -----------------------------------------------------------------------------
# EDITOR CLASS
# -----------------------------------------------------------------------------

class TreeEditor:
    """
    Editor for a staged upload forest.

    Every successful create, upload or delete invokes `on_change` exactly
    once with the complete new forest. Absorbed requests leave the forest
    alone and do not invoke the callback.
    """

    def __init__(
            self,
            forest: Iterable[Node],
            on_change: ChangeCallback,
            id_generator: Optional[IdGenerator] = None,
    ):
        """
        Initialize the editor for the host's current forest.

        Args:
            forest: Forest currently held by the host.
            on_change: Host setter receiving each new forest.
            id_generator: Identifier source; a random one is created if omitted.
        """
        self.forest: Forest = tuple(forest)
        self.on_change = on_change
        self.ids = id_generator or IdGenerator()
        self.ids.reserve(collect_ids(self.forest))

        self._expanded: Set[str] = set()
        self.create_dialog = CreateDialogState()
        self.delete_dialog = DeleteDialogState()
        self._upload_parent_id: Optional[str] = None

    # -------------------------------------------------------------------------
    # HOST SYNCHRONIZATION
    # -------------------------------------------------------------------------

    def set_forest(self, forest: Iterable[Node]) -> None:
        """Replace the working forest with the one the host now holds."""
        self.forest = tuple(forest)
        self.ids.reserve(collect_ids(self.forest))

    # -------------------------------------------------------------------------
    # FOREST OPERATIONS
    # -------------------------------------------------------------------------

    def create(self, kind: NodeKind, parent_id: Optional[str], name: str) -> EditResult:
        """
        Create an empty file or folder under `parent_id` (None for root).

        A successful create inside a folder expands that folder.
        """
        result = operations.create_node(self.forest, kind, parent_id, name, self.ids)
        if self._emit(result, f"create {kind} '{(name or '').strip()}'") and parent_id is not None:
            self._expanded.add(parent_id)
        return result

    def upload_files(self, parent_id: Optional[str], items: Sequence[UploadItem]) -> EditResult:
        """Attach one file node per (filename, payload) item in one update."""
        result = operations.upload_files(self.forest, parent_id, items, self.ids)
        if self._emit(result, f"upload {len(items)} file(s)") and parent_id is not None:
            self._expanded.add(parent_id)
        return result

    def delete(self, node_id: str) -> EditResult:
        """Remove a node and its subtree. No confirmation happens here."""
        result = operations.delete_node(self.forest, node_id)
        self._emit(result, f"delete '{node_id}'")
        return result

    # -------------------------------------------------------------------------
    # EXPANSION STATE
    # -------------------------------------------------------------------------

    def toggle_expand(self, folder_id: str) -> None:
        """Flip a folder between expanded and collapsed."""
        if folder_id in self._expanded:
            self._expanded.discard(folder_id)
        else:
            self._expanded.add(folder_id)

    def is_expanded(self, folder_id: str) -> bool:
        return folder_id in self._expanded

    @property
    def expanded(self) -> FrozenSet[str]:
        return frozenset(self._expanded)

    def visible_rows(self) -> List[Tuple[Node, int]]:
        """
        List the rows the tree view shows, depth-first.

        Children of a folder appear only while the folder is expanded.

        Returns:
            List[Tuple[Node, int]]: Each visible node with its depth.
        """
        rows: List[Tuple[Node, int]] = []
        self._collect_rows(self.forest, 0, rows)
        return rows

    # -------------------------------------------------------------------------
    # CREATE DIALOG
    # -------------------------------------------------------------------------

    def open_create_dialog(self, kind: NodeKind, parent_id: Optional[str] = None) -> None:
        self.create_dialog = CreateDialogState(is_open=True, kind=kind, parent_id=parent_id)

    def set_create_name(self, text: str) -> None:
        self.create_dialog.name = text

    def confirm_create(self) -> EditResult:
        """
        Apply the create dialog.

        The dialog closes only when the node was actually created.
        """
        dialog = self.create_dialog
        result = self.create(dialog.kind, dialog.parent_id, dialog.name)
        if result.changed:
            self.create_dialog = CreateDialogState()
        return result

    def cancel_create(self) -> None:
        self.create_dialog = CreateDialogState()

    # -------------------------------------------------------------------------
    # UPLOAD TARGET
    # -------------------------------------------------------------------------

    def begin_upload(self, parent_id: Optional[str] = None) -> None:
        """Remember where the next file selection should land."""
        self._upload_parent_id = parent_id

    def complete_upload(self, items: Sequence[UploadItem]) -> EditResult:
        return self.upload_files(self._upload_parent_id, items)

    @property
    def upload_parent_id(self) -> Optional[str]:
        return self._upload_parent_id

    # -------------------------------------------------------------------------
    # DELETE CONFIRMATION
    # -------------------------------------------------------------------------

    def request_delete(self, node_id: str) -> bool:
        """
        Open the delete confirmation for a node.

        Returns:
            bool: False if the node is not in the current forest.
        """
        node = find_node(self.forest, node_id)
        if node is None:
            logger.debug(f"Delete request ignored: no node with id '{node_id}'.")
            return False
        self.delete_dialog = DeleteDialogState(is_open=True, target=node)
        return True

    def confirm_delete(self) -> Optional[EditResult]:
        """Apply the pending deletion, if any, and close the confirmation."""
        target = self.delete_dialog.target
        self.delete_dialog = DeleteDialogState()
        if target is None:
            return None
        return self.delete(target.id)

    def cancel_delete(self) -> None:
        self.delete_dialog = DeleteDialogState()

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _emit(self, result: EditResult, action: str) -> bool:
        """
        Adopt a changed forest and report it to the host.

        The forest is adopted before the callback, so a host that answers
        with `set_forest` still has the last word.
        """
        if not result.changed:
            logger.debug(f"Editor: {action} absorbed ({result.status.value}).")
            return False
        logger.info(f"Editor: {action} applied.")
        self.forest = result.forest
        self.on_change(result.forest)
        return True

    def _collect_rows(self, nodes: Forest, depth: int, rows: List[Tuple[Node, int]]) -> None:
        for node in nodes:
            rows.append((node, depth))
            if isinstance(node, FolderNode) and node.id in self._expanded:
                self._collect_rows(node.children, depth + 1, rows)
