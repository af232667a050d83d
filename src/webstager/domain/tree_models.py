from __future__ import annotations

"""
Staging Tree Data Models.

Provides the recursive node types that make up a staged upload forest.
Nodes are immutable; every edit produces a new forest value and leaves
the previous one untouched.
"""

from dataclasses import dataclass
from typing import Any, Literal, Optional, Tuple, Union

NodeKind = Literal["file", "folder"]

FILE: NodeKind = "file"
FOLDER: NodeKind = "folder"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the staging tree.

    Attributes:
        id: Opaque identifier, unique across the forest.
        name: Display name chosen at creation time.
        payload: Opaque handle to the file content, never inspected here.
    """
    id: str
    name: str
    payload: Optional[Any] = None

    @property
    def kind(self) -> NodeKind:
        return FILE


@dataclass(frozen=True)
class FolderNode:
    """
    Represents a container entry (folder) in the staging tree.

    Attributes:
        id: Opaque identifier, unique across the forest.
        name: Display name chosen at creation time.
        children: Ordered child nodes; order is display order.
    """
    id: str
    name: str
    children: Tuple["Node", ...] = ()

    @property
    def kind(self) -> NodeKind:
        return FOLDER


Node = Union[FolderNode, FileNode]

# Top-level ordered sequence of nodes (no implicit root)
Forest = Tuple[Node, ...]

# -----------------------------------------------------------------------------
# UPLOAD PAYLOADS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LocalFileHandle:
    """
    Reference to a file selected on the local machine.

    The handle is carried forward untouched; consuming the bytes is the
    responsibility of whoever submits the forest.
    """
    path: str


# (filename, payload) pair as delivered by a file picker
UploadItem = Tuple[str, Any]
