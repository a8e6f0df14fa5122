from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory and opens the byte stream that is
handed to the decoder: a file opened in binary mode or the binary buffer
of stdin.
"""

import os
import sys
from typing import BinaryIO, Optional

from charm.domain.errors import InputError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "charm"
UNIX_APP_DIR_NAME = ".charm"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent settings.

    Standards:
    - Windows: %LOCALAPPDATA%/charm
    - Linux/Mac: ~/.charm

    The directory is not created here; writers create it on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def describe_input(path: Optional[str]) -> str:
    """Human label for the input, used in log lines."""
    if is_stdin(path):
        return "<stdin>"
    return os.path.abspath(os.path.expanduser(str(path)))

# -----------------------------------------------------------------------------
# INPUT ACQUISITION
# -----------------------------------------------------------------------------

def is_stdin(path: Optional[str]) -> bool:
    return path is None or str(path).strip() in ("", STDIN_MARKER)


def open_input(path: Optional[str]) -> BinaryIO:
    """
    Open the byte stream to inspect.

    Args:
        path: File path, or None / "-" for standard input.

    Returns:
        BinaryIO: A binary stream exposing ``readinto``. The caller owns it
        and must close it unless it is stdin.

    Raises:
        InputError: The path does not exist, is a directory, or cannot be
            opened for reading.
    """
    if is_stdin(path):
        return sys.stdin.buffer

    full_path = describe_input(path)
    if not os.path.exists(full_path):
        raise InputError(f"Input path does not exist: {full_path}")
    if os.path.isdir(full_path):
        raise InputError(f"Input path is a directory: {full_path}")

    try:
        return open(full_path, "rb")
    except OSError as e:
        raise InputError(f"Cannot open input '{full_path}': {e}") from e
