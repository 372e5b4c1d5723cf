# topmark:header:start
#
#   project      : SubDiag
#   file         : __init__.py
#   file_relpath : src/subdiag/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for SubDiag."""

from __future__ import annotations
