from __future__ import annotations

"""
Read-only Forest Queries.

Traversal helpers shared by the editor, renderer and command line
interface. None of these functions modify the forest.
"""

from typing import Iterator, Optional, Set, Tuple

from webstager.domain.tree_models import FolderNode, Forest, Node


def iter_nodes(forest: Forest, depth: int = 0) -> Iterator[Tuple[Node, int]]:
    """
    Walk the forest depth-first in pre-order.

    Args:
        forest: Sequence of nodes to traverse.
        depth: Depth assigned to the top-level nodes.

    Yields:
        Tuple[Node, int]: Each node with its nesting depth.
    """
    for node in forest:
        yield node, depth
        if isinstance(node, FolderNode):
            yield from iter_nodes(node.children, depth + 1)


def find_node(forest: Forest, node_id: str) -> Optional[Node]:
    """Return the first node carrying `node_id`, or None."""
    for node, _ in iter_nodes(forest):
        if node.id == node_id:
            return node
    return None


def collect_ids(forest: Forest) -> Set[str]:
    return {node.id for node, _ in iter_nodes(forest)}


def count_nodes(forest: Forest) -> Tuple[int, int]:
    """
    Count folders and files in the forest.

    Returns:
        Tuple[int, int]: (folders, files).
    """
    folders = files = 0
    for node, _ in iter_nodes(forest):
        if isinstance(node, FolderNode):
            folders += 1
        else:
            files += 1
    return folders, files


def find_by_path(forest: Forest, path: str) -> Optional[Node]:
    """
    Resolve a slash separated name path to a node.

    Sibling names are not unique, so the first matching sibling wins at
    every level. Only folders are descended into.

    Args:
        forest: Forest to search.
        path: Names joined by '/', e.g. 'assets/img/logo.png'.

    Returns:
        Optional[Node]: The node at the end of the path, or None.
    """
    segments = [s for s in path.strip().split("/") if s.strip()]
    if not segments:
        return None

    level: Forest = forest
    current: Optional[Node] = None
    for i, name in enumerate(segments):
        current = next((n for n in level if n.name == name.strip()), None)
        if current is None:
            return None
        if i < len(segments) - 1:
            if not isinstance(current, FolderNode):
                return None
            level = current.children
    return current
