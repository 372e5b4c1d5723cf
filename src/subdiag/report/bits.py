# topmark:header:start
#
#   project      : SubDiag
#   file         : bits.py
#   file_relpath : src/subdiag/report/bits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixed-width unsigned integer helpers.

Python integers are unbounded, so the width of a rate is tracked explicitly
and every helper here takes it as an argument.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from subdiag.report.errors import RateOverflowError, ReadingWidthError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def max_unsigned(width: int) -> int:
    """Return the largest value an unsigned ``width``-bit integer can hold."""
    return (1 << width) - 1


def pack_bits(bits: Sequence[int], width: int) -> int:
    """Pack bits, most significant first, into an unsigned integer.

    Args:
        bits (Sequence[int]): Bits in column order (first element is the MSB).
        width (int): Width of the target integer in bits.

    Returns:
        int: The packed value.

    Raises:
        ReadingWidthError: If there are more bits than ``width``.
    """
    if len(bits) > width:
        raise ReadingWidthError(len(bits), width)
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def checked_mul(a: int, b: int, width: int) -> int:
    """Multiply two unsigned integers, failing if the product overflows ``width`` bits.

    Raises:
        RateOverflowError: If ``a * b`` does not fit in ``width`` bits.
    """
    product = a * b
    if product > max_unsigned(width):
        raise RateOverflowError(a, b, width)
    return product


def vote_bits(counts: Iterable[int], threshold: int, *, majority: bool) -> list[int]:
    """Return one bit per column by comparing its count to a threshold.

    Args:
        counts (Iterable[int]): Per-column counts of 1-bits.
        threshold (int): Value each count is compared against.
        majority (bool): If True, a bit is set when ``count > threshold``;
            otherwise when ``count < threshold``. A count equal to the
            threshold yields 0 either way.

    Returns:
        list[int]: The synthesized bits, in column order.
    """
    if majority:
        return [1 if count > threshold else 0 for count in counts]
    return [1 if count < threshold else 0 for count in counts]
