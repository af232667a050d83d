from __future__ import annotations

"""
File Kind Classification.

Maps staged file names to the icon category shown next to them in the
tree view.
"""

from enum import Enum

from webstager.domain import constants as const


class FileKind(str, Enum):
    CODE = "code"
    IMAGE = "image"
    TEXT = "text"
    GENERIC = "generic"


def classify_file(name: str) -> FileKind:
    """
    Classify a file name by its extension.

    The text after the last dot is the extension; a name without a dot is
    matched as a whole, so 'README' counts as text.

    Args:
        name: File name as displayed in the tree.

    Returns:
        FileKind: Icon category for the name.
    """
    ext = (name or "").rsplit(".", 1)[-1].strip().lower()
    for kind, extensions in const.FILE_KIND_EXTENSIONS.items():
        if ext in extensions:
            return FileKind(kind)
    return FileKind.GENERIC
