from __future__ import annotations

"""
Build Pipeline Domain Data Models.

Defines the result object and factory functions used to communicate
build outcomes between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from docnav.domain.document_models import GenerationReport

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Unified result object of a complete build.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        docs_dir: Normalized documentation root.
        dry_run: Whether file-system writes were suppressed.
        site_config: Assembled configuration for the rendering engine.
        generation: Counters of the proxy generation step.
        output_file: Path where the site config was written, if any.
        summary: Technical execution summary and statistics.
    """
    ok: bool
    error: str

    docs_dir: str
    dry_run: bool = False

    site_config: Dict[str, Any] = field(default_factory=dict)
    generation: Optional[GenerationReport] = None
    output_file: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        docs_dir: str,
        dry_run: bool = False,
        generation: Optional[GenerationReport] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> BuildResult:
    """
    Create a failed build result instance.

    Args:
        error: Detailed error description.
        docs_dir: The target documentation root.
        dry_run: Whether the run was a simulation.
        generation: Partial generation counters, if the step ran.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=error,
        docs_dir=docs_dir,
        dry_run=dry_run,
        generation=generation,
        summary=summary_extra or {},
    )


def create_success_result(
        docs_dir: str,
        site_config: Dict[str, Any],
        generation: GenerationReport,
        dry_run: bool = False,
        output_file: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> BuildResult:
    """
    Create a successful build result instance.

    Args:
        docs_dir: Normalized documentation root.
        site_config: Assembled site configuration.
        generation: Counters of the proxy generation step.
        dry_run: Whether the run was a simulation.
        output_file: Path of the written site config.
        summary_extra: Final execution metrics.

    Returns:
        BuildResult: An immutable success result object.
    """
    return BuildResult(
        ok=True,
        error="",
        docs_dir=docs_dir,
        dry_run=dry_run,
        site_config=site_config,
        generation=generation,
        output_file=output_file,
        summary=summary_extra or {},
    )
