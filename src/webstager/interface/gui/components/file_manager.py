from __future__ import annotations

"""
Web File Manager Component.

Tree view for staging web platform files: a toolbar for root-level
actions, one row per visible node with expand/collapse and per-node
actions, and an empty-state message. All edits go through a TreeEditor;
the forest itself belongs to the host that created the frame.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional

import customtkinter as ctk

from webstager.core.editor.tree_editor import TreeEditor
from webstager.core.tree.identifiers import IdGenerator
from webstager.domain.tree_models import FILE, FOLDER, Forest, Node, NodeKind
from webstager.interface.gui.dialogs.confirm_delete_dialog import ask_confirm_delete
from webstager.interface.gui.dialogs.create_node_dialog import CreateNodeDialog
from webstager.interface.gui.utils import tk_helpers
from webstager.utils.i18n import i18n

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# FILE MANAGER VIEW CLASS
# -----------------------------------------------------------------------------

class FileManagerFrame(ctk.CTkFrame):
    """
    Editable tree of staged folders and files.

    The host passes its current forest and a setter. After calling the
    setter the host is expected to hand the new forest back through
    `set_forest`, which re-renders the rows.
    """

    def __init__(
            self,
            master: Any,
            forest: Iterable[Node],
            on_change: Callable[[Forest], None],
            id_generator: Optional[IdGenerator] = None,
            confirm_delete: bool = True,
            **kwargs: Any,
    ):
        """
        Build the toolbar and tree area.

        Args:
            master: Parent UI container.
            forest: Forest currently held by the host.
            on_change: Host setter called with every new forest.
            id_generator: Identifier source for new nodes.
            confirm_delete: Ask before deleting a node.
        """
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.editor = TreeEditor(forest, on_change, id_generator)
        self.confirm_delete = confirm_delete
        self._row_widgets: List[ctk.CTkFrame] = []
        self._create_dialog: Optional[CreateNodeDialog] = None

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        # -----------------------------------------------------------------------------
        # COMPONENT: TOOLBAR
        # -----------------------------------------------------------------------------
        toolbar = ctk.CTkFrame(self, fg_color="transparent")
        toolbar.grid(row=0, column=0, sticky="ew", pady=(0, 10))

        self.btn_new_folder = ctk.CTkButton(
            toolbar,
            text=i18n.t("gui.toolbar.new_folder"),
            width=110,
            command=lambda: self.open_create(FOLDER, None),
        )
        self.btn_new_folder.pack(side="left", padx=(0, 6))

        self.btn_new_file = ctk.CTkButton(
            toolbar,
            text=i18n.t("gui.toolbar.new_file"),
            width=110,
            command=lambda: self.open_create(FILE, None),
        )
        self.btn_new_file.pack(side="left", padx=6)

        self.btn_upload = ctk.CTkButton(
            toolbar,
            text=i18n.t("gui.toolbar.upload"),
            width=110,
            command=lambda: self.upload_into(None),
        )
        self.btn_upload.pack(side="left", padx=6)

        # -----------------------------------------------------------------------------
        # COMPONENT: TREE AREA
        # -----------------------------------------------------------------------------
        self.tree_area = ctk.CTkScrollableFrame(self, corner_radius=12, height=300)
        self.tree_area.grid(row=1, column=0, sticky="nsew")
        self.tree_area.grid_columnconfigure(0, weight=1)

        self.refresh()

    # -------------------------------------------------------------------------
    # HOST SYNCHRONIZATION
    # -------------------------------------------------------------------------

    def set_forest(self, forest: Iterable[Node]) -> None:
        self.editor.set_forest(forest)
        self.refresh()

    def refresh(self) -> None:
        """Rebuild every row from the editor's visible rows."""
        for widget in self._row_widgets:
            widget.destroy()
        self._row_widgets = []

        rows = self.editor.visible_rows()
        if not rows:
            self._render_empty_state()
            return

        for index, (node, depth) in enumerate(rows):
            self._row_widgets.append(self._render_row(index, node, depth))

    # -------------------------------------------------------------------------
    # USER ACTIONS
    # -------------------------------------------------------------------------

    def open_create(self, kind: NodeKind, parent_id: Optional[str]) -> None:
        logger.debug(f"User interaction: create {kind} requested (parent={parent_id}).")
        self.editor.open_create_dialog(kind, parent_id)
        self._create_dialog = CreateNodeDialog(self, self.editor, on_done=self._on_create_closed)

    def upload_into(self, parent_id: Optional[str]) -> None:
        self.editor.begin_upload(parent_id)
        selection = ctk.filedialog.askopenfilenames(
            parent=self,
            title=i18n.t("gui.dialogs.upload_title"),
        )
        items = tk_helpers.selection_to_items(selection)
        if items:
            self.editor.complete_upload(items)
        self.refresh()

    def delete_node(self, node_id: str) -> None:
        if not self.editor.request_delete(node_id):
            return
        if self.confirm_delete:
            ask_confirm_delete(self, self.editor)
        else:
            self.editor.confirm_delete()
        self.refresh()

    def toggle(self, folder_id: str) -> None:
        self.editor.toggle_expand(folder_id)
        self.refresh()

    # -------------------------------------------------------------------------
    # PRIVATE RENDERING
    # -------------------------------------------------------------------------

    def _on_create_closed(self) -> None:
        self._create_dialog = None
        self.refresh()

    def _render_empty_state(self) -> None:
        frame = ctk.CTkFrame(self.tree_area, fg_color="transparent")
        frame.grid(row=0, column=0, pady=60)
        ctk.CTkLabel(
            frame,
            text=i18n.t("gui.empty.title"),
            font=ctk.CTkFont(size=14, weight="bold"),
            text_color="gray",
        ).pack()
        ctk.CTkLabel(
            frame,
            text=i18n.t("gui.empty.hint"),
            font=ctk.CTkFont(size=11),
            text_color="gray",
        ).pack()
        self._row_widgets.append(frame)

    def _render_row(self, index: int, node: Node, depth: int) -> ctk.CTkFrame:
        row = ctk.CTkFrame(self.tree_area, fg_color="transparent")
        row.grid(row=index, column=0, sticky="ew", pady=1)
        row.grid_columnconfigure(2, weight=1)

        pad = tk_helpers.row_padding(depth)
        chevron = tk_helpers.chevron_text(node, self.editor.is_expanded(node.id))
        if chevron is not None:
            ctk.CTkButton(
                row,
                text=chevron,
                width=22,
                height=22,
                fg_color="transparent",
                text_color=("gray10", "#DCE4EE"),
                command=lambda nid=node.id: self.toggle(nid),
            ).grid(row=0, column=0, padx=(pad, 2))
        else:
            ctk.CTkLabel(row, text="", width=22).grid(row=0, column=0, padx=(pad, 2))

        ctk.CTkLabel(row, text=tk_helpers.node_glyph(node), width=24).grid(row=0, column=1)
        ctk.CTkLabel(row, text=node.name, anchor="w").grid(row=0, column=2, sticky="ew", padx=4)

        for col, action in enumerate(tk_helpers.row_actions(node), start=3):
            ctk.CTkButton(
                row,
                text=i18n.t(f"gui.row.{action}"),
                width=70,
                height=22,
                font=ctk.CTkFont(size=10),
                fg_color="#E04F5F" if action == "delete" else None,
                hover_color="#A03541" if action == "delete" else None,
                command=self._row_command(action, node),
            ).grid(row=0, column=col, padx=2)

        return row

    def _row_command(self, action: str, node: Node) -> Callable[[], None]:
        if action == "new_folder":
            return lambda: self.open_create(FOLDER, node.id)
        if action == "new_file":
            return lambda: self.open_create(FILE, node.id)
        if action == "upload":
            return lambda: self.upload_into(node.id)
        return lambda: self.delete_node(node.id)
