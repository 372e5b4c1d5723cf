# topmark:header:start
#
#   project      : SubDiag
#   file         : __init__.py
#   file_relpath : src/subdiag/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SubDiag CLI subcommands."""

from __future__ import annotations
