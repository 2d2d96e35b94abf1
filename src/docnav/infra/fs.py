from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation helpers. Relative paths handed
to the rendering engine are always POSIX-style, whatever the host separator.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def to_posix_relpath(target: str, start: str) -> str:
    """
    Compute a relative import path from a directory to a file.

    Args:
        target: File being referenced.
        start: Directory the reference is written from.

    Returns:
        str: Forward-slash relative path, prefixed with './' for siblings.
    """
    rel = os.path.relpath(target, start).replace(os.sep, "/")
    if not rel.startswith("."):
        rel = "./" + rel
    return rel

