# topmark:header:start
#
#   project      : SubDiag
#   file         : test_bits.py
#   file_relpath : tests/report/test_bits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for fixed-width bit packing and checked multiplication."""

from __future__ import annotations

import pytest

from subdiag.report.bits import checked_mul, max_unsigned, pack_bits, vote_bits
from subdiag.report.errors import RateOverflowError, ReadingWidthError


def test_max_unsigned() -> None:
    assert max_unsigned(1) == 1
    assert max_unsigned(8) == 255
    assert max_unsigned(64) == 18446744073709551615


@pytest.mark.parametrize(
    ("bits", "expected"),
    [
        ([1, 0, 1, 1, 0], 22),
        ([0, 1, 0, 0, 1], 9),
        ([0, 0, 0], 0),
        ([1] * 64, (1 << 64) - 1),
    ],
)
def test_pack_bits_msb_first(bits: list[int], expected: int) -> None:
    assert pack_bits(bits, 64) == expected


def test_pack_bits_rejects_too_many_bits() -> None:
    with pytest.raises(ReadingWidthError):
        pack_bits([1, 0, 1], 2)


def test_checked_mul_boundary() -> None:
    assert checked_mul(15, 17, 8) == 255
    with pytest.raises(RateOverflowError) as exc_info:
        checked_mul(16, 16, 8)
    assert (exc_info.value.gamma, exc_info.value.epsilon) == (16, 16)


def test_vote_bits_ties_yield_zero() -> None:
    counts = [3, 2, 1]
    assert vote_bits(counts, 2, majority=True) == [1, 0, 0]
    assert vote_bits(counts, 2, majority=False) == [0, 0, 1]
