from __future__ import annotations

"""
Domain Constants and Naming Conventions.

Centralizes the file naming conventions that encode navigation structure
(document extension, hidden suffix, landing page name) and the marker
token that identifies machine-generated proxy pages.
"""

# -----------------------------------------------------------------------------
# DOCUMENT NAMING CONVENTIONS
# -----------------------------------------------------------------------------

DOC_EXTENSION = ".md"
HIDDEN_SUFFIX = ".hidden.md"
HIDDEN_ENTRY_PREFIX = "."
INDEX_NAME = "index"

# -----------------------------------------------------------------------------
# PROXY GENERATION
# -----------------------------------------------------------------------------

# First line of every generated proxy; also signals "do not hand-edit"
PROXY_MARKER = "<!-- generated-proxy -->"

PROXY_TEMPLATE = (
    "{marker}\n"
    "<script setup>\n"
    "import Content from '{import_path}'\n"
    "</script>\n"
    "\n"
    "<Content/>\n"
)

# -----------------------------------------------------------------------------
# NAVIGATION DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_HOME_TEXT = "home"
DEFAULT_HOME_LINK = "/"
DEFAULT_ROOT_GROUP_TEXT = "root"
