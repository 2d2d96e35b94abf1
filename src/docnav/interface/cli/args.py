from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace
into configuration overrides.
"""

import argparse
from typing import Any, Dict

from docnav.domain.config import DEFAULT_CONFIG_FILE

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the docnav CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="docnav",
        description=(
            "Generate proxy pages for hidden Markdown documents and derive "
            "the sidebar navigation of a static documentation site."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-d", "--docs-dir",
        dest="docs_dir",
        default=None,
        help="Documentation root to scan (default: ./docs).",
    )
    p.add_argument(
        "-c", "--config",
        dest="config_file",
        default=DEFAULT_CONFIG_FILE,
        help=f"JSON configuration file (default: {DEFAULT_CONFIG_FILE}).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Write the site config JSON to this file instead of stdout.",
    )

    # --- Site Metadata ---
    p.add_argument("--title", default=None, help="Site title.")
    p.add_argument("--description", default=None, help="Site description.")
    p.add_argument("--base", default=None, help="Base URL path prefix.")
    p.add_argument("--home-link", dest="home_link", default=None, help="Target of the home link.")

    # --- Runtime Constraints ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Report which proxies would be created without writing anything.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Write the resolved configuration to the config file and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full build result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset (None means unset).
    """
    return {
        "docs_dir": args.docs_dir,
        "output_file": args.output_file,
        "title": args.title,
        "description": args.description,
        "base": args.base,
        "home_link": args.home_link,
    }
