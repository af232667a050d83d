from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes to the CLI when arguments are given and to the GUI otherwise, and
installs an exception hook so fatal crashes are logged and reported in a
way that fits the active interface.
"""

import logging
import sys
import traceback
from typing import Any, List, Optional

from webstager.domain.constants import APP_NAME
from webstager.infra.logging import get_recent_logs

logger = logging.getLogger("webstager.supervisor")

CRASH_LOG_LINES = 15


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and report it to the user.

    CLI runs get the trace on stderr; GUI runs get a message box with the
    tail of the persistent log.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    if issubclass(exctype, KeyboardInterrupt):
        sys.__excepthook__(exctype, value, tb)
        return

    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    if len(sys.argv) > 1:
        print("\n" + "=" * 80, file=sys.stderr)
        print(f"CRITICAL ERROR ({APP_NAME.upper()} CLI)", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(stack_trace, file=sys.stderr)
        return

    try:
        from tkinter import messagebox as mb
        mb.showerror(
            f"{APP_NAME} - Fatal Error",
            f"{value}\n\nRecent log entries:\n{get_recent_logs(CRASH_LOG_LINES)}",
        )
    except Exception:
        print(stack_trace, file=sys.stderr)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Launch the CLI or the GUI.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler
    args = sys.argv[1:] if argv is None else argv

    if args:
        from webstager.interface.cli.app import main as cli_main
        return cli_main(args)

    from webstager.interface.gui.app import main as gui_main
    gui_main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
