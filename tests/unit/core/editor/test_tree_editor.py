from __future__ import annotations

"""
Unit tests for the Staging Tree Editor.

Verifies:
1. The change callback fires once per successful edit and never on no-ops.
2. Auto-expansion of target folders after create and upload.
3. Local expansion state and visible rows.
4. Create dialog, upload target and delete confirmation flows.
"""

from webstager.core.editor.tree_editor import TreeEditor
from webstager.core.tree.identifiers import IdGenerator
from webstager.domain.edit_models import EditStatus
from webstager.domain.tree_models import FILE, FOLDER, FolderNode


# -----------------------------------------------------------------------------
# CALLBACK CONTRACT
# -----------------------------------------------------------------------------

def test_create_reports_new_forest_to_host(editor: TreeEditor, host) -> None:
    result = editor.create(FOLDER, None, "assets")

    assert result.changed
    assert host.changes == [result.forest]
    assert host.forest[0].name == "assets"
    assert editor.forest == host.forest


def test_noops_do_not_call_host(editor: TreeEditor, host) -> None:
    assert editor.create(FOLDER, None, "   ").status is EditStatus.EMPTY_NAME
    assert editor.create(FILE, "missing", "a").status is EditStatus.TARGET_NOT_FOUND
    assert editor.upload_files(None, []).status is EditStatus.EMPTY_BATCH
    assert editor.delete("missing").status is EditStatus.NODE_NOT_FOUND
    editor.toggle_expand("anything")

    assert host.changes == []


def test_upload_lands_as_single_update(editor: TreeEditor, host) -> None:
    folder_id = editor.create(FOLDER, None, "assets").forest[0].id
    editor.upload_files(folder_id, [("a.js", 1), ("b.js", 2), ("c.js", 3)])

    assert len(host.changes) == 2
    assert [c.name for c in host.forest[0].children] == ["a.js", "b.js", "c.js"]


def test_editor_never_mutates_previous_forest(editor: TreeEditor, host) -> None:
    editor.create(FOLDER, None, "assets")
    first = host.forest
    editor.create(FILE, first[0].id, "index.html")

    assert first[0].children == ()
    assert host.forest is not first


def test_editor_works_on_latest_host_forest(sample_forest, ids: IdGenerator, host) -> None:
    """The editor always edits the forest the host last handed to it."""
    host.forest = sample_forest
    ed = TreeEditor(host.forest, host.on_change, ids)
    host.editor = ed

    ed.delete("x-index")
    ed.create(FILE, None, "about.html")

    assert [n.name for n in host.forest] == ["assets", "about.html"]


def test_setter_only_host_keeps_every_edit(ids: IdGenerator) -> None:
    """A host that only stores the reported forest still sees all edits."""
    seen = []
    ed = TreeEditor((), seen.append, ids)

    ed.create(FOLDER, None, "a")
    ed.create(FOLDER, None, "b")
    ed.delete(seen[-1][0].id)

    assert [[n.name for n in forest] for forest in seen] == [["a"], ["a", "b"], ["b"]]
    assert ed.forest is seen[-1]


def test_host_override_during_callback_wins(ids: IdGenerator) -> None:
    ed = TreeEditor((), lambda _f: ed.set_forest(()), ids)
    assert ed.create(FOLDER, None, "a").changed
    assert ed.forest == ()


def test_none_name_is_absorbed(editor: TreeEditor, host) -> None:
    result = editor.create(FOLDER, None, None)  # type: ignore[arg-type]

    assert result.status is EditStatus.EMPTY_NAME
    assert host.changes == []


def test_unknown_kind_is_absorbed(editor: TreeEditor, host) -> None:
    assert editor.create("dir", None, "a").status is EditStatus.INVALID_KIND  # type: ignore[arg-type]
    assert host.changes == []


def test_initial_ids_are_reserved(sample_forest) -> None:
    draws = iter(["x-logo", "fresh"])
    gen = IdGenerator("random", token_source=lambda _n: next(draws))
    ed = TreeEditor(sample_forest, lambda _f: None, gen)
    result = ed.create(FILE, None, "new.txt")
    assert result.forest[-1].id == "fresh"


# -----------------------------------------------------------------------------
# EXPANSION
# -----------------------------------------------------------------------------

def test_create_inside_folder_expands_it(editor: TreeEditor, host) -> None:
    folder_id = editor.create(FOLDER, None, "assets").forest[0].id
    assert not editor.is_expanded(folder_id)

    editor.create(FILE, folder_id, "a.txt")
    assert folder_id in editor.expanded


def test_upload_inside_folder_expands_it(editor: TreeEditor) -> None:
    folder_id = editor.create(FOLDER, None, "assets").forest[0].id
    editor.upload_files(folder_id, [("x.png", None)])
    assert editor.is_expanded(folder_id)


def test_root_create_does_not_expand_anything(editor: TreeEditor) -> None:
    editor.create(FOLDER, None, "assets")
    editor.upload_files(None, [("x.png", None)])
    assert editor.expanded == frozenset()


def test_rejected_create_does_not_expand(sample_forest, host) -> None:
    ed = TreeEditor(sample_forest, host.on_change)
    ed.create(FILE, "f-img", "")
    assert not ed.is_expanded("f-img")


def test_toggle_expand_flips_membership(editor: TreeEditor) -> None:
    editor.toggle_expand("f1")
    assert editor.is_expanded("f1")
    editor.toggle_expand("f1")
    assert not editor.is_expanded("f1")


def test_visible_rows_follow_expansion(sample_forest, host) -> None:
    ed = TreeEditor(sample_forest, host.on_change)
    assert [(n.name, d) for n, d in ed.visible_rows()] == [("assets", 0), ("index.html", 0)]

    ed.toggle_expand("f-assets")
    ed.toggle_expand("f-img")
    assert [(n.name, d) for n, d in ed.visible_rows()] == [
        ("assets", 0),
        ("img", 1),
        ("logo.png", 2),
        ("style.css", 1),
        ("index.html", 0),
    ]


def test_stale_expanded_entry_is_inert(editor: TreeEditor, host) -> None:
    folder_id = editor.create(FOLDER, None, "assets").forest[0].id
    editor.toggle_expand(folder_id)
    editor.delete(folder_id)

    assert editor.is_expanded(folder_id)
    assert editor.visible_rows() == []


# -----------------------------------------------------------------------------
# CREATE DIALOG
# -----------------------------------------------------------------------------

def test_create_dialog_flow(editor: TreeEditor, host) -> None:
    editor.open_create_dialog(FOLDER)
    dialog = editor.create_dialog
    assert dialog.is_open and dialog.kind == FOLDER and dialog.parent_id is None
    assert dialog.can_confirm is False
    assert dialog.title == "Create New Folder"

    editor.set_create_name("  site  ")
    assert editor.create_dialog.can_confirm is True

    result = editor.confirm_create()
    assert result.changed
    assert host.forest[0].name == "site"
    assert editor.create_dialog.is_open is False


def test_create_dialog_stays_open_on_blank_name(editor: TreeEditor, host) -> None:
    editor.open_create_dialog(FILE)
    editor.set_create_name("   ")

    result = editor.confirm_create()

    assert result.status is EditStatus.EMPTY_NAME
    assert editor.create_dialog.is_open is True
    assert host.changes == []


def test_create_dialog_targets_parent(editor: TreeEditor, host) -> None:
    folder_id = editor.create(FOLDER, None, "assets").forest[0].id
    editor.open_create_dialog(FILE, folder_id)
    assert editor.create_dialog.placeholder == "File name (e.g., index.html)"
    editor.set_create_name("index.html")
    editor.confirm_create()

    assert host.forest[0].children[0].name == "index.html"
    assert editor.is_expanded(folder_id)


def test_cancel_create_resets_dialog(editor: TreeEditor) -> None:
    editor.open_create_dialog(FILE, "x")
    editor.set_create_name("draft")
    editor.cancel_create()
    assert editor.create_dialog.is_open is False
    assert editor.create_dialog.name == ""


# -----------------------------------------------------------------------------
# UPLOAD TARGET
# -----------------------------------------------------------------------------

def test_begin_and_complete_upload(editor: TreeEditor, host) -> None:
    folder_id = editor.create(FOLDER, None, "assets").forest[0].id
    editor.begin_upload(folder_id)
    assert editor.upload_parent_id == folder_id

    editor.complete_upload([("a.js", "h1")])
    assert host.forest[0].children[0].payload == "h1"

    editor.begin_upload()
    editor.complete_upload([("root.txt", None)])
    assert host.forest[-1].name == "root.txt"


# -----------------------------------------------------------------------------
# DELETE CONFIRMATION
# -----------------------------------------------------------------------------

def test_request_delete_describes_folder(sample_forest, host) -> None:
    ed = TreeEditor(sample_forest, host.on_change)
    assert ed.request_delete("f-assets") is True

    dialog = ed.delete_dialog
    assert dialog.is_open
    assert dialog.title == "Delete Folder"
    assert dialog.description == (
        'Are you sure you want to delete "assets"? This will also delete all contents inside.'
    )


def test_request_delete_describes_file(sample_forest, host) -> None:
    ed = TreeEditor(sample_forest, host.on_change)
    ed.request_delete("x-index")
    assert ed.delete_dialog.title == "Delete File"
    assert ed.delete_dialog.description == 'Are you sure you want to delete "index.html"?'


def test_request_delete_unknown_node(editor: TreeEditor) -> None:
    assert editor.request_delete("missing") is False
    assert editor.delete_dialog.is_open is False


def test_confirm_delete_applies_and_closes(sample_forest, host) -> None:
    ed = TreeEditor(sample_forest, host.on_change)
    host.editor = ed
    ed.request_delete("f-assets")

    result = ed.confirm_delete()

    assert result is not None and result.changed
    assert [n.id for n in host.forest] == ["x-index"]
    assert ed.delete_dialog.is_open is False


def test_cancel_delete_keeps_forest(sample_forest, host) -> None:
    ed = TreeEditor(sample_forest, host.on_change)
    ed.request_delete("f-assets")
    ed.cancel_delete()

    assert ed.confirm_delete() is None
    assert host.changes == []
    assert isinstance(ed.forest[0], FolderNode)
