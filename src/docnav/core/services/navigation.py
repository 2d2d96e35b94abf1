from __future__ import annotations

"""
Sidebar Navigation Builder.

Derives a two-level navigation tree from the current file layout: a
home link, a group of root-level pages, then one group per top-level
folder. Hidden documents and generated proxies are never listed. The
tree is recomputed from disk on every call, so it must be requested
after proxy generation has finished.
"""

import logging
import os
from typing import Dict, List

from docnav.core.services.walker import discover_documents
from docnav.domain.constants import (
    DEFAULT_HOME_LINK,
    DEFAULT_HOME_TEXT,
    DEFAULT_ROOT_GROUP_TEXT,
    INDEX_NAME,
)
from docnav.domain.document_models import Document
from docnav.domain.nav_models import NavGroup, NavLeaf, NavTree

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def build_navigation(
        root_dir: str,
        *,
        home_text: str = DEFAULT_HOME_TEXT,
        home_link: str = DEFAULT_HOME_LINK,
        root_group_text: str = DEFAULT_ROOT_GROUP_TEXT,
) -> NavTree:
    """
    Build the sidebar tree for the documentation root.

    Args:
        root_dir: Documentation root.
        home_text: Label of the leading home link.
        home_link: Target of the leading home link.
        root_group_text: Label of the group holding root-level pages.

    Returns:
        NavTree: Home leaf, optional root group, then folder groups.

    Raises:
        FileSystemError: If the root cannot be enumerated.
    """
    root_abs = os.path.abspath(root_dir)

    root_docs: List[Document] = []
    folder_docs: Dict[str, List[Document]] = {}

    # Dict insertion order keeps folders in traversal order
    for doc in discover_documents(root_abs):
        rel_dir = os.path.relpath(doc.parent, root_abs)
        if rel_dir == os.curdir:
            root_docs.append(doc)
            continue
        parts = rel_dir.split(os.sep)
        folder_docs.setdefault(parts[0], [])
        if len(parts) == 1:
            folder_docs[parts[0]].append(doc)

    tree: NavTree = [NavLeaf(text=home_text, link=home_link)]

    root_items = [
        NavLeaf(text=doc.base_name, link=f"/{doc.base_name}")
        for doc in root_docs
        if _is_listable(doc) and doc.base_name != INDEX_NAME
    ]
    if root_items:
        tree.append(NavGroup(text=root_group_text, items=root_items))

    for folder, docs in folder_docs.items():
        items = [_folder_leaf(folder, doc) for doc in docs if _is_listable(doc)]
        if not items:
            logger.debug(f"Folder '{folder}' has no listable documents; omitted")
            continue
        tree.append(NavGroup(text=folder, items=items))

    return tree


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _is_listable(doc: Document) -> bool:
    """Exclude hidden documents and generated proxies."""
    if doc.is_hidden:
        return False
    try:
        return not doc.is_generated()
    except OSError as e:
        logger.warning(f"Cannot read '{doc.path}' to check for proxy marker: {e}")
        return True


def _folder_leaf(folder: str, doc: Document) -> NavLeaf:
    name = doc.base_name
    if name == INDEX_NAME:
        return NavLeaf(text=name, link=f"/{folder}/")
    return NavLeaf(text=name, link=f"/{folder}/{name}")
