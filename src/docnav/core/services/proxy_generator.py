from __future__ import annotations

"""
Hidden Document Proxy Generation Service.

For every `<name>.hidden.md` document, ensures a companion `<name>.md`
exists that imports and renders the hidden content. The companion starts
with the proxy marker, which makes regeneration a no-op and lets the
navigation builder recognize it. A file already present at the target
path is never modified: a marked one is an up-to-date proxy, an unmarked
one is authored content and takes precedence.
"""

import logging
import os

from docnav.core.pipeline.components.writer import write_proxy_file
from docnav.core.services.walker import discover_documents
from docnav.domain.document_models import Document, DocumentError, GenerationReport
from docnav.infra.fs import to_posix_relpath

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def generate_proxies(root_dir: str, *, dry_run: bool = False) -> GenerationReport:
    """
    Materialize proxy pages for all hidden documents under `root_dir`.

    Idempotent: a second run over the same tree writes nothing. Failures
    on individual documents are logged and recorded; the run continues.

    Args:
        root_dir: Documentation root.
        dry_run: If True, perform every check but write nothing.

    Returns:
        GenerationReport: Counters of created, skipped and failed proxies.

    Raises:
        FileSystemError: If the root cannot be enumerated.
    """
    root_abs = os.path.abspath(root_dir)
    report = GenerationReport(dry_run=dry_run)

    for doc in discover_documents(root_abs):
        if not doc.is_hidden:
            continue

        rel_path = os.path.relpath(doc.path, root_abs)
        try:
            _ensure_proxy(doc, report, dry_run)
        except OSError as e:
            logger.error(f"Proxy generation failed for '{rel_path}': {e}")
            report.errors.append(DocumentError(rel_path=rel_path, error=str(e)))

    logger.info(
        f"Proxy generation finished: {report.created} created, "
        f"{report.skipped} skipped, {report.errored} errors"
        + (" (dry run)" if dry_run else "")
    )
    return report


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _ensure_proxy(doc: Document, report: GenerationReport, dry_run: bool) -> None:
    target = Document(doc.target_path)

    if os.path.exists(target.path):
        if target.is_generated():
            logger.debug(f"Proxy already present: {target.path}")
            report.skipped_existing += 1
        else:
            logger.warning(
                f"'{target.path}' exists without the proxy marker; "
                f"hidden document '{doc.name}' will not be proxied"
            )
            report.skipped_authored += 1
        return

    import_path = to_posix_relpath(doc.path, target.parent)

    if not dry_run:
        write_proxy_file(target.path, import_path)
        logger.debug(f"Proxy written: {target.path} -> {import_path}")

    report.created += 1
    report.created_paths.append(target.path)
