from __future__ import annotations

"""
Main Application Window Factory.

Initializes the root CustomTkinter window, applies the configured
appearance and lays out the grid that hosts the file manager and the
status bar.
"""

from typing import Any, Dict

import customtkinter as ctk

from webstager.domain import constants as const
from webstager.utils.i18n import i18n


def create_main_window(config: Dict[str, Any]) -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        config: Validated session configuration.

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode(config.get("appearance_mode", "System"))
    ctk.set_default_color_theme(config.get("color_theme", "blue"))

    app = ctk.CTk()
    app.title(f"{i18n.t('app.title')} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("760x560")
    app.minsize(520, 380)

    # Row 0: file manager, Row 1: status bar
    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app
