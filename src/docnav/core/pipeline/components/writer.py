from __future__ import annotations

"""
Proxy and Site Config Persistence.

Renders proxy page content and handles the physical writes of the build:
proxy pages next to their hidden sources and the assembled site config.
"""

import json
import os
from typing import Any, Dict

from docnav.domain.constants import PROXY_MARKER, PROXY_TEMPLATE

# -----------------------------------------------------------------------------
# PROXY CONTENT
# -----------------------------------------------------------------------------

def render_proxy_content(import_path: str) -> str:
    """
    Build the content of a proxy page.

    Output Format:
    <!-- generated-proxy -->
    <script setup>
    import Content from '<import_path>'
    </script>

    <Content/>

    Args:
        import_path: POSIX relative path from the proxy to the hidden source.

    Returns:
        str: The full proxy text.
    """
    return PROXY_TEMPLATE.format(marker=PROXY_MARKER, import_path=import_path)

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_proxy_file(target_path: str, import_path: str) -> None:
    """
    Create a proxy page at `target_path`, creating parent directories.

    Opens in exclusive mode so a file that appeared after the existence
    check is never overwritten.

    Args:
        target_path: Visible path of the proxy.
        import_path: Relative path to the hidden source.

    Raises:
        FileExistsError: If the target appeared in the meantime.
        OSError: If filesystem write permissions are denied.
    """
    parent = os.path.dirname(target_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(target_path, "x", encoding="utf-8", newline="\n") as f:
        f.write(render_proxy_content(import_path))


def write_site_config(output_path: str, site_config: Dict[str, Any]) -> None:
    """
    Persist the assembled site configuration as JSON.

    Args:
        output_path: Target JSON file.
        site_config: Configuration produced by the assembler.

    Raises:
        OSError: If the file cannot be written.
    """
    parent = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(parent, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(site_config, f, ensure_ascii=False, indent=2)
        f.write("\n")
