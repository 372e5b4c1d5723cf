# topmark:header:start
#
#   project      : SubDiag
#   file         : constants.py
#   file_relpath : src/subdiag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SubDiag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SUBDIAG_VERSION: str = get_version("subdiag")

# Local config file names, in increasing precedence
PYPROJECT_TOML_NAME: str = "pyproject.toml"
SUBDIAG_TOML_NAME: str = "subdiag.toml"

# Width of the gamma and epsilon rates (unsigned 64-bit by default)
DEFAULT_RATE_WIDTH: int = 64
