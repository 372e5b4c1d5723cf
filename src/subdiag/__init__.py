# topmark:header:start
#
#   project      : SubDiag
#   file         : __init__.py
#   file_relpath : src/subdiag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SubDiag package.

SubDiag parses submarine diagnostic reports (a matrix of binary readings),
derives the gamma and epsilon rates from per-column majority/minority votes,
and reports their product as the energy consumption. It exposes both a CLI and
a small typed API (`subdiag.report`).
"""

from __future__ import annotations
