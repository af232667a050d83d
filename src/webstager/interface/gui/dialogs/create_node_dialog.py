from __future__ import annotations

"""
Create Node Dialog.

Modal window asking for the name of a new file or folder. The Create
button stays disabled while the name is blank; Enter confirms.
"""

import logging
from typing import Any, Callable

import customtkinter as ctk

from webstager.core.editor.tree_editor import TreeEditor
from webstager.utils.i18n import i18n

logger = logging.getLogger(__name__)


class CreateNodeDialog(ctk.CTkToplevel):
    """
    Name prompt bound to the editor's create dialog state.

    The dialog writes every keystroke into the editor and closes itself
    once the editor reports the dialog as closed.
    """

    def __init__(self, master: Any, editor: TreeEditor, on_done: Callable[[], None], **kwargs: Any):
        super().__init__(master, **kwargs)
        self.editor = editor
        self.on_done = on_done
        state = editor.create_dialog

        self.title(state.title)
        self.geometry("380x150")
        self.resizable(False, False)
        self.transient(master)

        self.grid_columnconfigure(0, weight=1)

        self.entry_name = ctk.CTkEntry(self, placeholder_text=state.placeholder)
        self.entry_name.grid(row=0, column=0, columnspan=2, sticky="ew", padx=20, pady=(20, 10))
        self.entry_name.bind("<KeyRelease>", self._on_name_changed)
        self.entry_name.bind("<Return>", lambda _e: self._on_confirm())
        self.entry_name.bind("<Escape>", lambda _e: self._on_cancel())

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=1, column=0, sticky="e", padx=20, pady=10)

        self.btn_cancel = ctk.CTkButton(
            btn_frame,
            text=i18n.t("editor.create.cancel"),
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "#DCE4EE"),
            width=90,
            command=self._on_cancel,
        )
        self.btn_cancel.pack(side="left", padx=5)

        self.btn_create = ctk.CTkButton(
            btn_frame,
            text=i18n.t("editor.create.confirm"),
            width=90,
            state="disabled",
            command=self._on_confirm,
        )
        self.btn_create.pack(side="left", padx=5)

        self.protocol("WM_DELETE_WINDOW", self._on_cancel)
        self.after(50, self._grab_focus)

    def _grab_focus(self) -> None:
        self.grab_set()
        self.entry_name.focus_set()

    def _on_name_changed(self, _event: Any = None) -> None:
        self.editor.set_create_name(self.entry_name.get())
        self.btn_create.configure(state="normal" if self.editor.create_dialog.can_confirm else "disabled")

    def _on_confirm(self) -> None:
        self._on_name_changed()
        if not self.editor.create_dialog.can_confirm:
            return
        self.editor.confirm_create()
        if not self.editor.create_dialog.is_open:
            self._close()

    def _on_cancel(self) -> None:
        self.editor.cancel_create()
        self._close()

    def _close(self) -> None:
        self.grab_release()
        self.destroy()
        self.on_done()
