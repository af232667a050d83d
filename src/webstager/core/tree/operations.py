from __future__ import annotations

"""
Forest Edit Operations.

Pure functions that turn (forest, request) into a new forest. Each one
rebuilds the ancestor chain of the changed location and reuses every
untouched subtree. Invalid requests never raise: they return the input
forest with a status explaining why nothing happened.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from webstager.core.tree.identifiers import IdFactory
from webstager.domain.edit_models import EditResult, EditStatus, applied, rejected
from webstager.domain.tree_models import (
    FILE,
    FOLDER,
    FileNode,
    FolderNode,
    Forest,
    Node,
    NodeKind,
    UploadItem,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_node(
        forest: Forest,
        kind: NodeKind,
        parent_id: Optional[str],
        name: str,
        id_factory: IdFactory,
) -> EditResult:
    """
    Append a new empty file or folder to the root or to a folder.

    Args:
        forest: Current forest.
        kind: 'file' or 'folder'.
        parent_id: Target folder id, or None for the forest root.
        name: Display name; surrounding whitespace is trimmed.
        id_factory: Source of fresh identifiers.

    Returns:
        EditResult: APPLIED with the new forest, or EMPTY_NAME /
                    INVALID_KIND / TARGET_NOT_FOUND with the input forest.
    """
    clean_name = (name or "").strip()
    if not clean_name:
        logger.debug("Create absorbed: blank name.")
        return rejected(forest, EditStatus.EMPTY_NAME)

    if kind not in (FILE, FOLDER):
        logger.debug(f"Create absorbed: unknown node kind {kind!r}.")
        return rejected(forest, EditStatus.INVALID_KIND)

    if parent_id is not None and not _has_folder(forest, parent_id):
        logger.debug(f"Create absorbed: no folder with id '{parent_id}'.")
        return rejected(forest, EditStatus.TARGET_NOT_FOUND)

    node: Node
    if kind == FOLDER:
        node = FolderNode(id=id_factory(), name=clean_name)
    else:
        node = FileNode(id=id_factory(), name=clean_name)

    return _append(forest, parent_id, (node,))


def upload_files(
        forest: Forest,
        parent_id: Optional[str],
        items: Sequence[UploadItem],
        id_factory: IdFactory,
) -> EditResult:
    """
    Append one file node per uploaded item in a single forest update.

    Args:
        forest: Current forest.
        parent_id: Target folder id, or None for the forest root.
        items: Ordered (filename, payload) pairs.
        id_factory: Source of fresh identifiers.

    Returns:
        EditResult: APPLIED with the new forest, or EMPTY_BATCH /
                    TARGET_NOT_FOUND with the input forest.
    """
    if not items:
        logger.debug("Upload absorbed: empty batch.")
        return rejected(forest, EditStatus.EMPTY_BATCH)

    if parent_id is not None and not _has_folder(forest, parent_id):
        logger.debug(f"Upload absorbed: no folder with id '{parent_id}'.")
        return rejected(forest, EditStatus.TARGET_NOT_FOUND)

    new_nodes = tuple(
        FileNode(id=id_factory(), name=filename, payload=payload)
        for filename, payload in items
    )
    return _append(forest, parent_id, new_nodes)


def delete_node(forest: Forest, node_id: str) -> EditResult:
    """
    Remove a node, and its whole subtree when it is a folder.

    Args:
        forest: Current forest.
        node_id: Identifier of the node to remove.

    Returns:
        EditResult: APPLIED with the pruned forest, or NODE_NOT_FOUND
                    with the input forest.
    """
    pruned, removed = _remove(forest, node_id)
    if not removed:
        logger.debug(f"Delete absorbed: no node with id '{node_id}'.")
        return rejected(forest, EditStatus.NODE_NOT_FOUND)
    return applied(pruned)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (RECURSIVE TRANSFORMS)
# -----------------------------------------------------------------------------

def _append(forest: Forest, parent_id: Optional[str], new_nodes: Forest) -> EditResult:
    """Attach nodes at the resolved location."""
    if parent_id is None:
        return applied(tuple(forest) + new_nodes)

    updated, found = _append_to_folder(forest, parent_id, new_nodes)
    if not found:
        return rejected(forest, EditStatus.TARGET_NOT_FOUND)
    return applied(updated)


def _append_to_folder(
        nodes: Forest,
        parent_id: str,
        new_nodes: Forest,
) -> Tuple[Forest, bool]:
    """
    Rebuild `nodes` with `new_nodes` appended to the target folder.

    Only folder children are searched. Subtrees without the target are
    returned as the same objects.
    """
    out: List[Node] = []
    found = False

    for node in nodes:
        if not isinstance(node, FolderNode):
            out.append(node)
            continue

        if node.id == parent_id:
            out.append(FolderNode(id=node.id, name=node.name, children=node.children + new_nodes))
            found = True
            continue

        children, hit = _append_to_folder(node.children, parent_id, new_nodes)
        if hit:
            out.append(FolderNode(id=node.id, name=node.name, children=children))
            found = True
        else:
            out.append(node)

    return (tuple(out), True) if found else (nodes, False)


def _remove(nodes: Forest, node_id: str) -> Tuple[Forest, bool]:
    """Drop every entry whose id equals `node_id`, at any depth."""
    out: List[Node] = []
    removed = False

    for node in nodes:
        if node.id == node_id:
            removed = True
            continue

        if isinstance(node, FolderNode):
            children, hit = _remove(node.children, node_id)
            if hit:
                out.append(FolderNode(id=node.id, name=node.name, children=children))
                removed = True
                continue

        out.append(node)

    return (tuple(out), True) if removed else (nodes, False)


def _has_folder(nodes: Forest, folder_id: str) -> bool:
    for node in nodes:
        if isinstance(node, FolderNode):
            if node.id == folder_id or _has_folder(node.children, folder_id):
                return True
    return False
