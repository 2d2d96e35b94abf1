from __future__ import annotations

"""
Core build pipeline.

Coordinates the whole build, strictly in sequence:
1. Validates configuration and the documentation root.
2. Generates proxy pages for hidden documents.
3. Builds the sidebar from the post-generation file layout.
4. Assembles the site configuration.
5. Optionally persists the site configuration as JSON.
"""

import logging
import os
from typing import Any, Dict, Optional

from docnav.core.pipeline.components.writer import write_site_config
from docnav.core.pipeline.stages.validator import validate_config
from docnav.core.services.assembler import assemble_site_config
from docnav.core.services.navigation import build_navigation
from docnav.core.services.proxy_generator import generate_proxies
from docnav.domain.document_models import FileSystemError, GenerationReport
from docnav.domain.pipeline_models import (
    BuildResult,
    create_error_result,
    create_success_result,
)
from docnav.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_build(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> BuildResult:
    """
    Execute the full documentation build.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, simulate proxy creation and skip all writes.

    Returns:
        BuildResult: Object containing status, site config and summary.
    """
    logger.info("Build started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    docs_dir = normalize_path(cfg["docs_dir"], os.getcwd())

    if not os.path.isdir(docs_dir):
        msg = f"Documentation directory does not exist: {docs_dir}"
        logger.error(msg)
        return create_error_result(msg, docs_dir, dry_run=dry_run)

    # -------------------------------------------------------------------------
    # 2) Proxy Generation (must finish before navigation is derived)
    # -------------------------------------------------------------------------
    generation: Optional[GenerationReport] = None
    try:
        generation = generate_proxies(docs_dir, dry_run=dry_run)

        # ---------------------------------------------------------------------
        # 3) Navigation & Assembly
        # ---------------------------------------------------------------------
        sidebar = build_navigation(
            docs_dir,
            home_text=cfg["home_text"],
            home_link=cfg["home_link"],
            root_group_text=cfg["root_group_text"],
        )
    except FileSystemError as e:
        msg = f"Documentation tree could not be read: {e}"
        logger.critical(msg)
        return create_error_result(msg, docs_dir, dry_run=dry_run, generation=generation)

    site_config = assemble_site_config(cfg, sidebar)

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    output_file = ""
    if cfg["output_file"] and not dry_run:
        output_file = normalize_path(cfg["output_file"], os.getcwd())
        try:
            write_site_config(output_file, site_config)
            logger.info(f"Site config written to {output_file}")
        except OSError as e:
            msg = f"Failed to write site config '{output_file}': {e}"
            logger.error(msg)
            return create_error_result(msg, docs_dir, dry_run=dry_run, generation=generation)

    summary = {
        "proxies_created": generation.created,
        "proxies_skipped": generation.skipped,
        "proxy_errors": generation.errored,
        "sidebar_groups": sum(1 for node in site_config["themeConfig"]["sidebar"] if "items" in node),
        "warnings": warnings,
    }

    logger.info("Build finished.")
    return create_success_result(
        docs_dir=docs_dir,
        site_config=site_config,
        generation=generation,
        dry_run=dry_run,
        output_file=output_file,
        summary_extra=summary,
    )
