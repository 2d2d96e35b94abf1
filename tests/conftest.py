from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and documentation trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'docnav.domain.config'.
    """
    return {
        "docs_dir": "/tmp/test_docs",
        "output_file": "",
        "title": "Azimuth Docs",
        "description": "Documentation of the Azimuth library",
        "src_dir": "docs",
        "base": "/AzimuthDocs/",
        "home_text": "home",
        "home_link": "/azimuth",
        "root_group_text": "root",
        "social_links": [{"icon": "github", "link": "https://github.com/vuejs/vitepress"}],
    }


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """
    Create a documentation tree exercising every naming convention.

    Structure:
    /docs
      index.md
      azimuth.md
      secret.hidden.md
      /.vitepress
        notes.md
      /guide
        index.md
        install.md
        advanced.hidden.md
      /setup
        config.md
        index.md
      /empty
      /assets
        logo.png
    """
    root = tmp_path / "docs"
    root.mkdir()

    (root / "index.md").write_text("# Home\n", encoding="utf-8")
    (root / "azimuth.md").write_text("# Azimuth\n", encoding="utf-8")
    (root / "secret.hidden.md").write_text("# Secret\n", encoding="utf-8")

    (root / ".vitepress").mkdir()
    (root / ".vitepress" / "notes.md").write_text("internal", encoding="utf-8")

    (root / "guide").mkdir()
    (root / "guide" / "index.md").write_text("# Guide\n", encoding="utf-8")
    (root / "guide" / "install.md").write_text("# Install\n", encoding="utf-8")
    (root / "guide" / "advanced.hidden.md").write_text("# Advanced\n", encoding="utf-8")

    (root / "setup").mkdir()
    (root / "setup" / "config.md").write_text("# Config\n", encoding="utf-8")
    (root / "setup" / "index.md").write_text("# Setup\n", encoding="utf-8")

    (root / "empty").mkdir()

    (root / "assets").mkdir()
    (root / "assets" / "logo.png").write_bytes(b"\x89PNG")

    return root
