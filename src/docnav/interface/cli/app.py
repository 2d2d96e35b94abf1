from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of
configuration sources (defaults, JSON file, CLI overrides), build
execution, and result rendering.
"""

import argparse
import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from docnav.core.pipeline.engine import run_build
from docnav.core.pipeline.stages.validator import validate_config
from docnav.domain.config import get_default_config, load_config, save_config
from docnav.domain.pipeline_models import BuildResult
from docnav.infra.fs import normalize_path
from docnav.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from docnav.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 build failure, 2 missing docs dir).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file), force=True)

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    base_conf = get_default_config() if args.use_defaults else load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        if not save_config(clean_conf, args.config_file):
            print(f"ERROR: Could not write {args.config_file}", file=sys.stderr)
            return 1
        print(f"Configuration saved to: {args.config_file}")
        return 0

    docs_dir = normalize_path(clean_conf["docs_dir"], os.getcwd())
    if not os.path.isdir(docs_dir):
        msg = f"Documentation directory does not exist: {docs_dir}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    try:
        result = run_build(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Build interrupted by user.")
        return 130

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into the base configuration.

    Only keys known to the base configuration are merged.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """
    Print the build result to the terminal.

    Without an output file the site config itself goes to stdout, so it can
    be piped into the rendering engine; the summary then goes to stderr.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    report_stream = sys.stdout
    if not result.output_file and not result.dry_run:
        print(json.dumps(result.site_config, ensure_ascii=False, indent=2))
        report_stream = sys.stderr

    gen = result.generation
    if result.dry_run:
        print("SIMULATION COMPLETE (no files written)", file=report_stream)
        if gen:
            for path in gen.created_paths:
                print(f"  would create: {path}", file=report_stream)

    if gen:
        print(f"Proxies created: {gen.created}", file=report_stream)
        print(f"Proxies skipped: {gen.skipped}", file=report_stream)
        print(f"Proxy errors: {gen.errored}", file=report_stream)
        for err in gen.errors:
            print(f"  - {err.rel_path}: {err.error}", file=report_stream)

    if result.output_file:
        print(f"Site config written to: {result.output_file}", file=report_stream)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
