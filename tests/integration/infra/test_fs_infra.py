from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates cross-platform data directory resolution and the conversion
of picked local paths into upload items.
"""

import os
from pathlib import Path
from unittest.mock import patch

from webstager.domain.tree_models import LocalFileHandle
from webstager.infra.fs import get_user_data_dir, upload_items_from_paths

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "WebStager" in path


def test_get_user_data_dir_unix() -> None:
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/home/testuser/.webstager")


# -----------------------------------------------------------------------------
# UPLOAD SELECTION TESTS
# -----------------------------------------------------------------------------

def test_upload_items_use_basenames(tmp_path: Path) -> None:
    a = tmp_path / "main.js"
    b = tmp_path / "sub" / "logo.png"

    items = upload_items_from_paths([str(a), str(b)])

    assert [name for name, _ in items] == ["main.js", "logo.png"]
    assert items[0][1] == LocalFileHandle(path=os.path.abspath(str(a)))


def test_upload_items_skip_blank_entries() -> None:
    assert upload_items_from_paths(["", "   ", None]) == []  # type: ignore[list-item]


def test_upload_items_do_not_require_existing_files(tmp_path: Path) -> None:
    items = upload_items_from_paths([str(tmp_path / "ghost.txt")])
    assert items[0][0] == "ghost.txt"
