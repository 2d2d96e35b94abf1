from __future__ import annotations

"""
Unit tests for Configuration Persistence.

Verifies default fallback, merging over defaults and round-trip saving.
"""

import json
from pathlib import Path

from docnav.domain.config import get_default_config, load_config, save_config


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "none.json")) == get_default_config()


def test_load_config_merges_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "docnav.json"
    path.write_text(json.dumps({"title": "Azimuth Docs", "unknown": True}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["title"] == "Azimuth Docs"
    assert cfg["docs_dir"] == "docs"
    assert "unknown" not in cfg


def test_load_config_corrupted_file(tmp_path: Path) -> None:
    path = tmp_path / "docnav.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "docnav.json"
    cfg = get_default_config()
    cfg["base"] = "/AzimuthDocs/"

    assert save_config(cfg, str(path)) is True

    assert load_config(str(path)) == cfg


def test_save_reports_unwritable_target(tmp_path: Path) -> None:
    target = tmp_path / "taken"
    target.mkdir()

    assert save_config(get_default_config(), str(target)) is False
