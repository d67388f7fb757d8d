from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user directory holding the state file and diagnostic
logs, uniformly across Windows and Unix-like systems.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeNav"
UNIX_APP_DIR_NAME = ".treenav"

# Overrides the resolved directory (tests, portable installs)
DATA_DIR_ENV_VAR = "TREENAV_HOME"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - $TREENAV_HOME when set
    - Windows: %LOCALAPPDATA%/TreeNav
    - Linux/Mac: ~/.treenav

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = os.environ.get(DATA_DIR_ENV_VAR, "").strip()

    # Windows specific resolution
    if not path and os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)
