from __future__ import annotations

"""
Delete Confirmation Dialog.

Asks the user to confirm the deletion staged in the editor's delete
dialog state. Folders warn that their contents go too.
"""

from tkinter import messagebox as mb
from typing import Any

from webstager.core.editor.tree_editor import TreeEditor


def ask_confirm_delete(parent: Any, editor: TreeEditor) -> bool:
    """
    Show the pending deletion and apply or cancel it.

    Args:
        parent: Window the message box belongs to.
        editor: Editor whose delete dialog is open.

    Returns:
        bool: True if the deletion was applied.
    """
    state = editor.delete_dialog
    if not state.is_open:
        return False

    if mb.askyesno(state.title, state.description, icon=mb.WARNING, parent=parent):
        result = editor.confirm_delete()
        return bool(result and result.changed)

    editor.cancel_delete()
    return False
