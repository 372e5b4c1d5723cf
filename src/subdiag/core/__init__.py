# topmark:header:start
#
#   project      : SubDiag
#   file         : __init__.py
#   file_relpath : src/subdiag/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across SubDiag.

Included modules:

- ``formats``
  The `OutputFormat` vocabulary shared by the config layer and the CLI.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.
"""

from __future__ import annotations
