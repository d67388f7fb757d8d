from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI (any arguments) or the GUI (no arguments) and
installs a global exception hook so fatal crashes are logged and reported
on the active interface.
"""

import functools
import logging
import sys
import traceback
from typing import Any, List, Optional

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(
        exctype: type[BaseException],
        value: BaseException,
        tb: Any,
        cli_mode: Optional[bool] = None
) -> None:
    """
    Trap unhandled exceptions and route them to interface-appropriate reporters.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
        cli_mode: Interface that was running. When None (hook installed
            outside main()), falls back to the process arguments.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("treenav.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    if cli_mode is None:
        cli_mode = len(sys.argv) > 1

    # CLI Fallback: Detailed trace to stderr
    if cli_mode:
        print("\n" + "=" * 80, file=sys.stderr)
        print("CRITICAL ERROR (TREENAV CLI)", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(stack_trace, file=sys.stderr)
        return

    # GUI Fallback: native Tk alert
    try:
        import tkinter.messagebox as mb
        from tkinter import Tk

        from treenav.infra.logging import get_recent_logs

        root = Tk()
        root.withdraw()
        mb.showerror(
            "TreeNav - Fatal Error",
            f"A critical error occurred in the interface:\n\n{error_msg}\n\n"
            f"Recent log entries:\n{get_recent_logs(10)}"
        )
        root.destroy()
    except Exception:
        print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Detect execution context and delegate to the specific interface.

    Args:
        argv: Command line arguments without the program name.

    Returns:
        int: Standard process exit code (0: Success, 1: Error).
    """
    args = sys.argv[1:] if argv is None else argv
    cli_mode = bool(args)
    sys.excepthook = functools.partial(global_exception_handler, cli_mode=cli_mode)

    try:
        if cli_mode:
            from treenav.interface.cli.app import main as cli_main
            return cli_main(args)

        from treenav.interface.gui.app import main as gui_main
        gui_main()
        return 0

    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__, cli_mode=cli_mode)
        return 1


if __name__ == "__main__":
    sys.exit(main())
