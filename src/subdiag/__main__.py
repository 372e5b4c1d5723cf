# topmark:header:start
#
#   project      : SubDiag
#   file         : __main__.py
#   file_relpath : src/subdiag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SubDiag via ``python -m subdiag``.

Delegates to :func:`subdiag.cli.main.cli`, the single authoritative CLI entry
point.

Examples:
    Compute the energy consumption of a report read from STDIN::

        python -m subdiag < report.txt
"""

from __future__ import annotations

from subdiag.cli.main import cli

if __name__ == "__main__":
    cli()
