from __future__ import annotations

"""
Document Discovery Service.

Recursively enumerates Markdown documents under the documentation root.
Dot-entries and symbolic links are skipped entirely (neither listed nor
descended into) and each directory is visited in sorted name order
(landing page first), so two runs over an unchanged tree yield the same list.
"""

import logging
import os
from typing import List, Tuple

from docnav.domain.constants import DOC_EXTENSION, HIDDEN_ENTRY_PREFIX, INDEX_NAME
from docnav.domain.document_models import Document, FileSystemError

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def list_documents(root_dir: str) -> List[str]:
    """
    List every document file under `root_dir`, depth-first.

    Args:
        root_dir: Directory to scan.

    Returns:
        List[str]: Absolute file paths in traversal order.

    Raises:
        FileSystemError: If the root (or a directory below it) cannot be read.
    """
    root_abs = os.path.abspath(root_dir)
    if not os.path.isdir(root_abs):
        raise FileSystemError(f"Documentation root does not exist: {root_abs}")

    files: List[str] = []
    _walk(root_abs, files)
    logger.debug(f"Discovered {len(files)} documents under {root_abs}")
    return files


def discover_documents(root_dir: str) -> List[Document]:
    """Wrap `list_documents` output into Document records."""
    return [Document(path) for path in list_documents(root_dir)]


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _walk(dir_path: str, out: List[str]) -> None:
    try:
        with os.scandir(dir_path) as it:
            entries = sorted(it, key=_entry_sort_key)
    except OSError as e:
        raise FileSystemError(f"Cannot enumerate directory '{dir_path}': {e}") from e

    for entry in entries:
        if entry.name.startswith(HIDDEN_ENTRY_PREFIX):
            continue
        if entry.is_dir(follow_symlinks=False):
            _walk(entry.path, out)
        elif entry.is_file(follow_symlinks=False) and entry.name.endswith(DOC_EXTENSION):
            out.append(entry.path)


def _entry_sort_key(entry: os.DirEntry) -> Tuple[int, str]:
    # Landing page first, then plain name order
    return (0 if entry.name == INDEX_NAME + DOC_EXTENSION else 1, entry.name)
