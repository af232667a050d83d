from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a centralized singleton for the strings shown by the editor
dialogs, the tree view and the command line. Keys use dot-notation over
nested JSON locale files and support variable interpolation.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Loads one JSON dictionary at a time. Missing keys resolve to the
    caller's default, or to the key itself.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        """
        Initialize the manager and attempt to load the requested locale.

        Args:
            locale: ISO locale identifier (e.g., 'en', 'es').
        """
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def available_locales(self) -> List[str]:
        """List locale identifiers shipped in the locales directory."""
        try:
            names = os.listdir(self._locales_path)
        except OSError:
            return []
        return sorted(n[:-5] for n in names if n.endswith(".json"))

    def load_locale(self, locale: str) -> None:
        """
        Load a translation dictionary, falling back to the default locale.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale '{locale}' not found at '{file_path}'.")
            if locale != DEFAULT_LOCALE:
                self.load_locale(DEFAULT_LOCALE)
                return
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
            self._locale = locale
            self.is_loaded = True
            logger.debug(f"I18n: Loaded locale dictionary '{locale}'.")
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Unreadable locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'gui.toolbar.new_folder').
            default: Text used when the key cannot be resolved.
            **kwargs: Variables for string interpolation.

        Returns:
            str: The translated and formatted string.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                current_val = None
                break
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            current_val = default if default is not None else key

        if not kwargs:
            return current_val
        try:
            return current_val.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation failed for '{key}': {e}")
            return current_val

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

i18n = I18n(DEFAULT_LOCALE)
