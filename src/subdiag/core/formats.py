# topmark:header:start
#
#   project      : SubDiag
#   file         : formats.py
#   file_relpath : src/subdiag/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used across SubDiag frontends.

This module centralizes the `OutputFormat` enum so the config layer and the
CLI agree on the same format vocabulary without introducing `Click` or console
dependencies.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable).
    """

    # Human formats:
    TEXT = "text"
    MARKDOWN = "markdown"

    # Machine formats:
    JSON = "json"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt == OutputFormat.JSON
