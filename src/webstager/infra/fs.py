from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory and turns local file selections into
upload items. Paths are only inspected for their names; file contents are
never read here.
"""

import os
from typing import Iterable, List

from webstager.domain.tree_models import LocalFileHandle, UploadItem

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "WebStager"
UNIX_APP_DIR_NAME = ".webstager"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/WebStager
    - Linux/Mac: ~/.webstager

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


# -----------------------------------------------------------------------------
# UPLOAD SELECTION API
# -----------------------------------------------------------------------------

def upload_items_from_paths(paths: Iterable[str]) -> List[UploadItem]:
    """
    Wrap selected local paths as (filename, handle) upload items.

    Order is preserved and blank entries are skipped.

    Args:
        paths: Paths returned by a file picker or the command line.

    Returns:
        List[UploadItem]: One item per path, named after its basename.
    """
    items: List[UploadItem] = []
    for raw in paths:
        p = (raw or "").strip()
        if not p:
            continue
        abs_path = os.path.abspath(os.path.expanduser(p))
        items.append((os.path.basename(abs_path), LocalFileHandle(path=abs_path)))
    return items
