# topmark:header:start
#
#   project      : SubDiag
#   file         : __init__.py
#   file_relpath : src/subdiag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for SubDiag.

Re-exports the runtime config types. Logging lives in
`subdiag.config.logging` and TOML I/O in `subdiag.config.io`.
"""

from __future__ import annotations

from subdiag.config.io import ConfigLoadError
from subdiag.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "ConfigLoadError",
    "MutableConfig",
]
