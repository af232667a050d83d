from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants, including
versioning, identifier generation parameters and the extension groups used
to classify staged files.
"""

from typing import Dict, Tuple

APP_NAME = "WebStager"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# IDENTIFIER GENERATION
# -----------------------------------------------------------------------------
ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
ID_LENGTH = 9
ID_MAX_DRAWS = 64
ID_COUNTER_PREFIX = "n"

ID_STRATEGIES: Tuple[str, ...] = ("random", "counter")
DEFAULT_ID_STRATEGY = "random"

# -----------------------------------------------------------------------------
# FILE CLASSIFICATION
# -----------------------------------------------------------------------------
FILE_KIND_EXTENSIONS: Dict[str, Tuple[str, ...]] = {
    "code": (
        "html", "htm",
        "css", "scss", "sass", "less",
        "js", "jsx", "ts", "tsx", "json",
    ),
    "image": ("png", "jpg", "jpeg", "gif", "svg", "webp", "ico"),
    "text": ("txt", "md", "readme"),
}

# -----------------------------------------------------------------------------
# GUI DEFAULTS
# -----------------------------------------------------------------------------
APPEARANCE_MODES: Tuple[str, ...] = ("System", "Light", "Dark")
COLOR_THEMES: Tuple[str, ...] = ("blue", "green", "dark-blue")
TREE_INDENT_PX = 16
TREE_BASE_PAD_PX = 8
