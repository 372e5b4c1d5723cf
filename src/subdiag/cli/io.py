# topmark:header:start
#
#   project      : SubDiag
#   file         : io.py
#   file_relpath : src/subdiag/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for Click commands.

Reads the diagnostic text either from a file path or from STDIN (``-`` or no
path), translating OS errors into CLI errors with matching exit codes.
"""

from __future__ import annotations

import sys
from pathlib import Path

from subdiag.cli.errors import SubdiagFileNotFoundError, SubdiagIOError, SubdiagUsageError
from subdiag.config.logging import get_logger

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def read_input_text(source: str | None) -> str:
    """Return the diagnostic text from ``source``.

    Args:
        source (str | None): A file path, ``"-"`` for STDIN, or None (STDIN).

    Returns:
        str: The full input text.

    Raises:
        SubdiagFileNotFoundError: If the path does not exist.
        SubdiagUsageError: If the path is a directory, or STDIN is a terminal.
        SubdiagIOError: If the file cannot be read or decoded.
    """
    if source is None or source == STDIN_SENTINEL:
        # Nothing piped in: refuse instead of blocking on the terminal
        if not sys.stdin or sys.stdin.isatty():
            raise SubdiagUsageError(
                "No input: pipe a diagnostic report into STDIN or pass a file path."
            )
        logger.debug("Reading diagnostic data from STDIN")
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        raise SubdiagFileNotFoundError(f"Input file not found: {path}")
    if path.is_dir():
        raise SubdiagUsageError(f"Input path is a directory: {path}")

    logger.debug("Reading diagnostic data from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SubdiagIOError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise SubdiagIOError(f"Cannot read {path}: {exc}") from exc
