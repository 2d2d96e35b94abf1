from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the build: coerces the configuration dictionary (from
JSON or CLI overrides) into the expected schema, injects defaults for
missing keys and normalizes the URL base prefix.
"""

import logging
from typing import Any, Dict, List, Tuple

from docnav.domain.config import get_default_config

logger = logging.getLogger(__name__)

_STRING_FIELDS = [
    "docs_dir", "output_file", "title", "description", "src_dir",
    "base", "home_text", "home_link", "root_group_text",
]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["social_links"] = _as_list_of_links(
        merged.get("social_links"), "social_links", warnings, strict
    )
    merged["base"] = _normalize_base(merged["base"])

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_of_links(
        value: Any, field: str, warnings: List[str], strict: bool
) -> List[Dict[str, str]]:
    """Keep only `{icon, link}` string mappings."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Invalid field '{field}': expected list, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return []

    out: List[Dict[str, str]] = []
    for i, item in enumerate(value):
        if (
            isinstance(item, dict)
            and isinstance(item.get("icon"), str)
            and isinstance(item.get("link"), str)
        ):
            out.append({"icon": item["icon"], "link": item["link"]})
            continue
        msg = f"Invalid item in '{field}[{i}]': expected {{icon, link}} strings."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Item discarded.")
    return out


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_base(base: str) -> str:
    """Ensure the URL prefix starts and ends with '/'."""
    b = base.strip("/")
    return f"/{b}/" if b else "/"
