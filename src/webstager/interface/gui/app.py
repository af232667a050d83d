from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle.

Sets up logging and configuration, builds the main window and hosts a
FileManagerFrame. The window is the forest owner: it stores every forest
the editor reports, pushes it back into the frame and refreshes the
status bar.
"""

import logging
from typing import Any

import customtkinter as ctk

from webstager.core.services.validator import validate_config
from webstager.core.tree.identifiers import IdGenerator
from webstager.core.tree.queries import count_nodes
from webstager.core.tree.renderer import forest_to_lines
from webstager.domain import config as cfg
from webstager.domain import constants as const
from webstager.domain.tree_models import Forest
from webstager.infra.logging import LoggingConfig, configure_logging, get_default_gui_log_path
from webstager.interface.gui.components.file_manager import FileManagerFrame
from webstager.interface.gui.components.main_window import create_main_window
from webstager.utils.i18n import i18n

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# FOREST HOST
# -----------------------------------------------------------------------------

class ForestHost:
    """
    Owner of the staged forest for the desktop window.

    Receives each new forest, keeps it as the authoritative copy and
    forwards it to the view and the status bar.
    """

    def __init__(self) -> None:
        self.forest: Forest = ()
        self.view: Any = None
        self.status_label: Any = None

    def on_change(self, new_forest: Forest) -> None:
        self.forest = new_forest
        logger.debug("Staged tree:\n" + "\n".join(forest_to_lines(new_forest)))
        if self.view is not None:
            self.view.set_forest(new_forest)
        self.update_status()

    def update_status(self) -> None:
        if self.status_label is None:
            return
        folders, files = count_nodes(self.forest)
        self.status_label.configure(text=i18n.t("gui.status.summary", folders=folders, files=files))


# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main() -> None:
    """Initialize and launch the graphical editor."""
    # PHASE 1: CONFIGURATION
    config, warnings = validate_config(cfg.load_config())

    # PHASE 2: DIAGNOSTICS
    configure_logging(LoggingConfig.from_session(config, get_default_gui_log_path()))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if config["locale"] != i18n.locale:
        i18n.load_locale(config["locale"])

    # PHASE 3: VIEW CONSTRUCTION
    app = create_main_window(config)
    host = ForestHost()

    manager = FileManagerFrame(
        app,
        host.forest,
        host.on_change,
        id_generator=IdGenerator(config["id_strategy"]),
        confirm_delete=config["confirm_delete"],
    )
    manager.grid(row=0, column=0, sticky="nsew", padx=20, pady=(20, 10))
    host.view = manager

    host.status_label = ctk.CTkLabel(app, text="", anchor="w", text_color="gray")
    host.status_label.grid(row=1, column=0, sticky="ew", padx=24, pady=(0, 12))
    host.update_status()

    # PHASE 4: LIFECYCLE FINALIZATION
    def on_closing() -> None:
        cfg.save_config(config)
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_closing)
    app.mainloop()


if __name__ == "__main__":
    main()
