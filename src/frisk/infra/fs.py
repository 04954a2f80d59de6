from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the application data directory and
normalization of user-supplied paths. Acts as an abstraction over the 'os'
module to ensure uniform behavior across Windows and Unix-like systems.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Frisk"
UNIX_APP_DIR_NAME = ".frisk"
CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    The directory is not created here; callers that write into it are
    responsible for creating it.
    Standards:
    - Windows: %LOCALAPPDATA%/Frisk
    - Linux/Mac: ~/.frisk

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def get_config_file_path() -> str:
    """Return the absolute location of the optional user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Expand a user-supplied path without resolving it to an absolute path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). The scan keeps relative roots relative so that node
    paths mirror what the user typed.

    Args:
        path: Raw input path string.
        fallback: Default path to use when the input is empty.

    Returns:
        str: Expanded path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.expandvars(os.path.expanduser(p))
