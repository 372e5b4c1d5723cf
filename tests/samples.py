# topmark:header:start
#
#   project      : SubDiag
#   file         : samples.py
#   file_relpath : tests/samples.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared diagnostic report samples and their expected values."""

from __future__ import annotations

from typing import Final

#: Sample diagnostic report: gamma 22 (10110), epsilon 9 (01001), energy 198.
SAMPLE_READINGS: Final[tuple[str, ...]] = (
    "00100",
    "11110",
    "10110",
    "10111",
    "10101",
    "01111",
    "00111",
    "11100",
    "10000",
    "11001",
    "00010",
    "01010",
)
SAMPLE_TEXT: Final[str] = "\n".join(SAMPLE_READINGS) + "\n"
SAMPLE_GAMMA: Final[int] = 22
SAMPLE_EPSILON: Final[int] = 9
SAMPLE_ENERGY: Final[int] = 198

#: Two identical 64-bit readings: every column is unanimous, so gamma and
#: epsilon are bitwise complements spanning all 64 bits.
WIDE_READING: Final[str] = "10" * 32
WIDE_TEXT: Final[str] = f"{WIDE_READING}\n{WIDE_READING}\n"
WIDE_GAMMA: Final[int] = int(WIDE_READING, 2)
WIDE_EPSILON: Final[int] = (1 << 64) - 1 - WIDE_GAMMA


def sample_data() -> list[list[int]]:
    """Return the sample report as a fresh bit matrix."""
    return [[int(c) for c in reading] for reading in SAMPLE_READINGS]
