# topmark:header:start
#
#   project      : SubDiag
#   file         : keys.py
#   file_relpath : src/subdiag/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SubDiag configuration.

Keys defined here are the external configuration API as it appears in
``subdiag.toml`` and in ``[tool.subdiag]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SubDiag configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_SUBDIAG: Final[str] = "subdiag"

    # [report]
    SECTION_REPORT: Final[str] = "report"

    KEY_RATE_WIDTH: Final[str] = "rate_width"
    KEY_BIG_FALLBACK: Final[str] = "big_fallback"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_FORMAT: Final[str] = "format"
