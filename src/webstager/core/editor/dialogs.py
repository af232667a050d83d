from __future__ import annotations

"""
Editor Dialog State.

Plain state holders for the create and delete-confirmation dialogs. They
carry no forest data and are never reported to the host.
"""

from dataclasses import dataclass
from typing import Optional

from webstager.domain.tree_models import FOLDER, Node, NodeKind
from webstager.utils.i18n import i18n


@dataclass
class CreateDialogState:
    """
    Create dialog contents.

    Attributes:
        is_open: Whether the dialog is visible.
        kind: Kind of node being created.
        parent_id: Target folder, or None for the root.
        name: Current text of the name field.
    """
    is_open: bool = False
    kind: NodeKind = FOLDER
    parent_id: Optional[str] = None
    name: str = ""

    @property
    def can_confirm(self) -> bool:
        return bool(self.name.strip())

    @property
    def title(self) -> str:
        if self.kind == FOLDER:
            return i18n.t("editor.create.title_folder", default="Create New Folder")
        return i18n.t("editor.create.title_file", default="Create New File")

    @property
    def placeholder(self) -> str:
        if self.kind == FOLDER:
            return i18n.t("editor.create.placeholder_folder", default="Folder name")
        return i18n.t("editor.create.placeholder_file", default="File name (e.g., index.html)")


@dataclass
class DeleteDialogState:
    """Delete confirmation contents; `target` is the node awaiting confirmation."""
    is_open: bool = False
    target: Optional[Node] = None

    @property
    def title(self) -> str:
        if self.target is not None and self.target.kind == FOLDER:
            return i18n.t("editor.delete.title_folder", default="Delete Folder")
        return i18n.t("editor.delete.title_file", default="Delete File")

    @property
    def description(self) -> str:
        name = self.target.name if self.target is not None else ""
        text = i18n.t(
            "editor.delete.description",
            default='Are you sure you want to delete "{name}"?',
            name=name,
        )
        if self.target is not None and self.target.kind == FOLDER:
            text += i18n.t(
                "editor.delete.description_folder_extra",
                default=" This will also delete all contents inside.",
            )
        return text
