from __future__ import annotations

"""
Document Domain Data Models.

Defines the typed intermediate representation of discovered documents,
the per-file error record used during proxy generation, and the fatal
error raised when the documentation root cannot be enumerated.
"""

import os
from dataclasses import dataclass, field
from typing import List

from docnav.domain.constants import DOC_EXTENSION, HIDDEN_SUFFIX, PROXY_MARKER

# -----------------------------------------------------------------------------
# ERROR MODELS
# -----------------------------------------------------------------------------

class FileSystemError(OSError):
    """Raised when the documentation root is missing or cannot be enumerated."""


@dataclass(frozen=True)
class DocumentError:
    """
    Encapsulates a non-fatal failure while touching a single document.

    Attributes:
        rel_path: Document path relative to the documentation root.
        error: Descriptive exception or error message.
    """
    rel_path: str
    error: str

# -----------------------------------------------------------------------------
# DOCUMENT RECORD
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Document:
    """
    A Markdown document discovered under the documentation root.

    Content is never cached on the record: every call to `read_first_line` or
    `is_generated` goes back to the file system so that proxies written
    earlier in the same build are observed.

    Attributes:
        path: Absolute filesystem path to the document.
    """
    path: str

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def parent(self) -> str:
        return os.path.dirname(self.path)

    @property
    def is_hidden(self) -> bool:
        return self.name.endswith(HIDDEN_SUFFIX)

    @property
    def base_name(self) -> str:
        """Final path segment with `.hidden.md` or `.md` stripped."""
        name = self.name
        if name.endswith(HIDDEN_SUFFIX):
            return name[: -len(HIDDEN_SUFFIX)]
        if name.endswith(DOC_EXTENSION):
            return name[: -len(DOC_EXTENSION)]
        return name

    @property
    def target_path(self) -> str:
        """Visible address of a hidden document (the proxy location)."""
        if not self.is_hidden:
            return self.path
        return os.path.join(self.parent, self.base_name + DOC_EXTENSION)

    def read_first_line(self) -> str:
        with open(self.path, "r", encoding="utf-8", errors="replace") as f:
            return f.readline()

    def is_generated(self) -> bool:
        """
        Check whether the document is a generated proxy.

        Returns:
            bool: True if the first line starts with the proxy marker.

        Raises:
            OSError: If the file cannot be read.
        """
        return self.read_first_line().startswith(PROXY_MARKER)

# -----------------------------------------------------------------------------
# GENERATION REPORT
# -----------------------------------------------------------------------------

@dataclass
class GenerationReport:
    """
    Outcome counters of a proxy generation run.

    Attributes:
        created: Proxies written (or that would be written on a dry run).
        skipped_existing: Targets already carrying the proxy marker.
        skipped_authored: Targets holding user content, left untouched.
        created_paths: Absolute paths of the created proxies.
        errors: Per-file failures isolated during the run.
        dry_run: Whether writes were suppressed.
    """
    created: int = 0
    skipped_existing: int = 0
    skipped_authored: int = 0
    created_paths: List[str] = field(default_factory=list)
    errors: List[DocumentError] = field(default_factory=list)
    dry_run: bool = False

    @property
    def skipped(self) -> int:
        return self.skipped_existing + self.skipped_authored

    @property
    def errored(self) -> int:
        return len(self.errors)
