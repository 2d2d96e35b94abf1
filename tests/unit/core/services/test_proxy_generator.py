from __future__ import annotations

"""
Unit tests for the Proxy Generation Service.

Verifies:
1. Proxy creation with marker and relative import path.
2. Idempotence across runs.
3. Authored content at the target path is never modified.
4. Per-file failures are isolated.
5. Dry-run mode writes nothing.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from docnav.core.pipeline.components.writer import write_proxy_file as real_write
from docnav.core.services.proxy_generator import generate_proxies
from docnav.domain.constants import PROXY_MARKER
from docnav.domain.document_models import Document, FileSystemError


def _snapshot(root: Path):
    return {
        str(p.relative_to(root)): (p.read_bytes(), p.stat().st_mtime_ns)
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


def test_generate_creates_proxy_for_hidden_document(tmp_path: Path) -> None:
    """guide.hidden.md without guide.md yields a marked proxy delegating back to it."""
    root = tmp_path / "docs"
    root.mkdir()
    (root / "guide.hidden.md").write_text("# Guide\n", encoding="utf-8")

    report = generate_proxies(str(root))

    proxy = root / "guide.md"
    assert proxy.exists()
    content = proxy.read_text(encoding="utf-8")
    assert content == (
        f"{PROXY_MARKER}\n"
        "<script setup>\n"
        "import Content from './guide.hidden.md'\n"
        "</script>\n"
        "\n"
        "<Content/>\n"
    )
    assert content.splitlines()[0] == PROXY_MARKER
    assert report.created == 1
    assert report.created_paths == [str(proxy)]
    assert report.errored == 0


def test_generate_handles_nested_directories(docs_tree: Path) -> None:
    report = generate_proxies(str(docs_tree))

    nested = docs_tree / "guide" / "advanced.md"
    assert nested.exists()
    assert "import Content from './advanced.hidden.md'" in nested.read_text(encoding="utf-8")
    assert (docs_tree / "secret.md").exists()
    assert report.created == 2


def test_generate_is_idempotent(docs_tree: Path) -> None:
    """A second run rewrites nothing and reports everything as skipped."""
    generate_proxies(str(docs_tree))
    before = _snapshot(docs_tree)

    report = generate_proxies(str(docs_tree))

    assert _snapshot(docs_tree) == before
    assert report.created == 0
    assert report.skipped_existing == 2
    assert report.errored == 0


def test_generate_never_clobbers_authored_content(tmp_path: Path) -> None:
    root = tmp_path / "docs"
    root.mkdir()
    (root / "guide.hidden.md").write_text("# Hidden\n", encoding="utf-8")
    authored = root / "guide.md"
    authored.write_text("# Hand written\n", encoding="utf-8")

    report = generate_proxies(str(root))

    assert authored.read_text(encoding="utf-8") == "# Hand written\n"
    assert report.skipped_authored == 1
    assert report.created == 0


def test_generate_does_not_rewrite_stale_proxy(tmp_path: Path) -> None:
    """An existing marked file is left alone even if its import path differs."""
    root = tmp_path / "docs"
    root.mkdir()
    (root / "guide.hidden.md").write_text("# Hidden\n", encoding="utf-8")
    stale = f"{PROXY_MARKER}\n<script setup>\nimport Content from './old.hidden.md'\n</script>\n"
    (root / "guide.md").write_text(stale, encoding="utf-8")

    report = generate_proxies(str(root))

    assert (root / "guide.md").read_text(encoding="utf-8") == stale
    assert report.skipped_existing == 1


def test_generate_isolates_per_file_errors(docs_tree: Path) -> None:
    """A write failure on one document does not stop the others."""
    def flaky_write(target_path: str, import_path: str) -> None:
        if target_path.endswith("secret.md"):
            raise PermissionError("read-only")
        real_write(target_path, import_path)

    with patch("docnav.core.services.proxy_generator.write_proxy_file", side_effect=flaky_write):
        report = generate_proxies(str(docs_tree))

    assert report.created == 1
    assert report.errored == 1
    assert report.errors[0].rel_path == "secret.hidden.md"
    assert "read-only" in report.errors[0].error
    assert (docs_tree / "guide" / "advanced.md").exists()
    assert not (docs_tree / "secret.md").exists()


def test_generate_dry_run_writes_nothing(docs_tree: Path) -> None:
    before = _snapshot(docs_tree)

    report = generate_proxies(str(docs_tree), dry_run=True)

    assert _snapshot(docs_tree) == before
    assert report.dry_run is True
    assert report.created == 2
    assert sorted(os.path.basename(p) for p in report.created_paths) == ["advanced.md", "secret.md"]


def test_generate_missing_root_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(FileSystemError):
        generate_proxies(str(tmp_path / "missing"))


def test_generate_isolates_unreadable_target(docs_tree: Path) -> None:
    """A target that cannot be read is recorded as an error; other proxies are still created."""
    real_read = Document.read_first_line

    def flaky_read(doc: Document) -> str:
        if doc.path.endswith("secret.md"):
            raise PermissionError("unreadable")
        return real_read(doc)

    (docs_tree / "secret.md").write_text("# Authored\n", encoding="utf-8")

    with patch.object(Document, "read_first_line", autospec=True, side_effect=flaky_read):
        report = generate_proxies(str(docs_tree))

    assert report.errored == 1
    assert report.errors[0].rel_path == "secret.hidden.md"
    assert "unreadable" in report.errors[0].error
    assert report.created == 1
    assert (docs_tree / "guide" / "advanced.md").exists()
    assert (docs_tree / "secret.md").read_text(encoding="utf-8") == "# Authored\n"


def test_generate_records_error_when_target_is_directory(docs_tree: Path) -> None:
    (docs_tree / "secret.md").mkdir()

    report = generate_proxies(str(docs_tree))

    assert report.errored == 1
    assert report.errors[0].rel_path == "secret.hidden.md"
    assert report.created == 1
    assert (docs_tree / "guide" / "advanced.md").exists()
