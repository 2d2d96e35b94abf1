from __future__ import annotations

"""
Integration tests for the Build Pipeline.

Runs the full sequence (generation -> navigation -> assembly ->
persistence) against real temporary documentation trees.
"""

import json
from pathlib import Path
from unittest.mock import patch

from docnav.core.pipeline.engine import run_build
from docnav.domain.constants import PROXY_MARKER
from docnav.domain.document_models import FileSystemError


def test_run_build_generates_and_assembles(docs_tree: Path, mock_config_dict) -> None:
    out = docs_tree.parent / "site.json"
    mock_config_dict["docs_dir"] = str(docs_tree)
    mock_config_dict["output_file"] = str(out)

    result = run_build(mock_config_dict)

    assert result.ok is True, result.error
    assert result.generation.created == 2
    assert (docs_tree / "secret.md").read_text(encoding="utf-8").startswith(PROXY_MARKER)

    sidebar = result.site_config["themeConfig"]["sidebar"]
    assert sidebar[0] == {"text": "home", "link": "/azimuth"}
    assert [node["text"] for node in sidebar[1:]] == ["root", "guide", "setup"]

    assert result.output_file == str(out)
    assert json.loads(out.read_text(encoding="utf-8")) == result.site_config
    assert result.summary["proxies_created"] == 2
    assert result.summary["sidebar_groups"] == 3


def test_run_build_twice_is_stable(docs_tree: Path) -> None:
    first = run_build({"docs_dir": str(docs_tree)})
    second = run_build({"docs_dir": str(docs_tree)})

    assert first.site_config == second.site_config
    assert second.generation.created == 0
    assert second.generation.skipped_existing == 2


def test_run_build_dry_run_writes_nothing(docs_tree: Path) -> None:
    out = docs_tree.parent / "site.json"

    result = run_build({"docs_dir": str(docs_tree), "output_file": str(out)}, dry_run=True)

    assert result.ok is True
    assert result.dry_run is True
    assert result.generation.created == 2
    assert not (docs_tree / "secret.md").exists()
    assert not out.exists()
    assert result.output_file == ""


def test_run_build_missing_docs_dir(tmp_path: Path) -> None:
    result = run_build({"docs_dir": str(tmp_path / "missing")})

    assert result.ok is False
    assert "does not exist" in result.error


def test_run_build_converts_fatal_walk_error(docs_tree: Path) -> None:
    with patch(
        "docnav.core.pipeline.engine.generate_proxies",
        side_effect=FileSystemError("cannot enumerate"),
    ):
        result = run_build({"docs_dir": str(docs_tree)})

    assert result.ok is False
    assert "cannot enumerate" in result.error


def test_run_build_per_file_error_is_non_fatal(docs_tree: Path) -> None:
    with patch(
        "docnav.core.services.proxy_generator.write_proxy_file",
        side_effect=PermissionError("read-only"),
    ):
        result = run_build({"docs_dir": str(docs_tree)})

    assert result.ok is True
    assert result.generation.errored == 2
    assert result.summary["proxy_errors"] == 2
