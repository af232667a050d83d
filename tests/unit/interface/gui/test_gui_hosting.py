from __future__ import annotations

"""
Unit tests for GUI glue code.

Verifies the delete confirmation bridge and the window's forest host
with mocked message boxes and widgets.
"""

from unittest.mock import MagicMock, patch

import pytest

from webstager.core.editor.tree_editor import TreeEditor
from webstager.interface.gui.app import ForestHost
from webstager.interface.gui.dialogs.confirm_delete_dialog import ask_confirm_delete

_ASKYESNO = "webstager.interface.gui.dialogs.confirm_delete_dialog.mb.askyesno"


@pytest.mark.gui
def test_confirmed_delete_is_applied(sample_forest, host) -> None:
    ed = TreeEditor(sample_forest, host.on_change)
    host.editor = ed
    ed.request_delete("f-assets")

    with patch(_ASKYESNO, return_value=True) as ask:
        assert ask_confirm_delete(None, ed) is True

    title, message = ask.call_args.args
    assert title == "Delete Folder"
    assert "assets" in message
    assert [n.id for n in host.forest] == ["x-index"]


@pytest.mark.gui
def test_declined_delete_is_cancelled(sample_forest, host) -> None:
    ed = TreeEditor(sample_forest, host.on_change)
    ed.request_delete("x-index")

    with patch(_ASKYESNO, return_value=False):
        assert ask_confirm_delete(None, ed) is False

    assert host.changes == []
    assert ed.delete_dialog.is_open is False


@pytest.mark.gui
def test_no_prompt_without_pending_delete(editor) -> None:
    with patch(_ASKYESNO) as ask:
        assert ask_confirm_delete(None, editor) is False
    ask.assert_not_called()


@pytest.mark.gui
def test_forest_host_forwards_changes(sample_forest) -> None:
    host = ForestHost()
    host.view = MagicMock()
    host.status_label = MagicMock()

    host.on_change(sample_forest)

    assert host.forest is sample_forest
    host.view.set_forest.assert_called_once_with(sample_forest)
    host.status_label.configure.assert_called_once_with(text="2 folders, 3 files")


@pytest.mark.gui
def test_forest_host_without_widgets() -> None:
    host = ForestHost()
    host.on_change(())
    assert host.forest == ()
