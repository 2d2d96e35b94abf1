from __future__ import annotations

"""
Site Configuration Assembler.

Composes static site metadata and the navigation tree into the single
configuration object consumed by the rendering engine.
"""

from typing import Any, Dict

from docnav.domain.constants import DEFAULT_HOME_LINK, DEFAULT_HOME_TEXT
from docnav.domain.nav_models import NavTree, nav_tree_to_dicts


def assemble_site_config(site_cfg: Dict[str, Any], sidebar: NavTree) -> Dict[str, Any]:
    """
    Merge site metadata with the sidebar navigation.

    The top navigation bar only carries the home link.

    Args:
        site_cfg: Validated build configuration.
        sidebar: Tree produced by `build_navigation`.

    Returns:
        Dict[str, Any]: JSON-compatible site configuration.
    """
    home = {
        "text": site_cfg.get("home_text", DEFAULT_HOME_TEXT),
        "link": site_cfg.get("home_link", DEFAULT_HOME_LINK),
    }
    return {
        "title": site_cfg.get("title", ""),
        "description": site_cfg.get("description", ""),
        "srcDir": site_cfg.get("src_dir", ""),
        "base": site_cfg.get("base", "/"),
        "themeConfig": {
            "nav": [home],
            "sidebar": nav_tree_to_dicts(sidebar),
            "socialLinks": [dict(link) for link in site_cfg.get("social_links", [])],
        },
    }
