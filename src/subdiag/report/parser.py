# topmark:header:start
#
#   project      : SubDiag
#   file         : parser.py
#   file_relpath : src/subdiag/report/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse diagnostic text into a bit matrix.

Only the characters are checked here. Emptiness and reading dimensions are
validated when the data is installed on a
[`DiagnosticReport`][subdiag.report.model.DiagnosticReport], so that bad
characters and bad shapes surface as different error kinds.
"""

from __future__ import annotations

from typing import Final

from subdiag.config.logging import get_logger
from subdiag.report.errors import BitOutOfRangeError

logger = get_logger(__name__)

_CHAR_TO_BIT: Final[dict[str, int]] = {"0": 0, "1": 1}


def normalize_line_endings(text: str) -> str:
    """Return ``text`` with every line boundary replaced by LF.

    Boundaries are those of `str.splitlines`: CRLF, CR, LF, NEL, form feed,
    the Unicode line and paragraph separators and the other ASCII separators.
    A trailing boundary is dropped.
    """
    return "\n".join(text.splitlines())


def data_from_text(text: str) -> list[list[int]]:
    """Parse the input text into diagnostic data.

    Surrounding whitespace is trimmed, line endings are normalized and blank
    lines are skipped. Each remaining line becomes one reading.

    Args:
        text (str): Text with one binary string per line.

    Returns:
        list[list[int]]: One list of bits per reading. Empty if ``text`` holds
            no readings.

    Raises:
        BitOutOfRangeError: If any character is not ``0`` or ``1``.
    """
    data: list[list[int]] = []
    lines = normalize_line_endings(text.strip()).split("\n")
    for line_no, line in enumerate(lines, start=1):
        if not line:
            continue
        reading: list[int] = []
        for col_no, char in enumerate(line, start=1):
            bit = _CHAR_TO_BIT.get(char)
            if bit is None:
                raise BitOutOfRangeError(line=line_no, column=col_no, value=char)
            reading.append(bit)
        data.append(reading)

    logger.trace("Parsed %d reading(s) from %d character(s) of text", len(data), len(text))
    return data
