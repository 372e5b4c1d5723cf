# topmark:header:start
#
#   project      : SubDiag
#   file         : test_report_overflow.py
#   file_relpath : tests/report/test_report_overflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for fixed-width overflow handling and the arbitrary-precision fallback."""

from __future__ import annotations

import pytest

from subdiag.report import DiagnosticReport, RateOverflowError, ReadingWidthError
from tests.samples import (
    SAMPLE_ENERGY,
    SAMPLE_EPSILON,
    SAMPLE_GAMMA,
    SAMPLE_TEXT,
    WIDE_EPSILON,
    WIDE_GAMMA,
    WIDE_TEXT,
)


def test_64_bit_rates_overflow_the_checked_product() -> None:
    report = DiagnosticReport.from_text(WIDE_TEXT)

    assert report.reading_length == 64
    assert report.gamma_rate() == WIDE_GAMMA
    assert report.epsilon_rate() == WIDE_EPSILON

    with pytest.raises(RateOverflowError) as exc_info:
        report.energy_consumption()
    assert isinstance(exc_info.value, OverflowError)
    assert exc_info.value.width == 64

    big = report.energy_consumption_big()
    assert big == WIDE_GAMMA * WIDE_EPSILON
    assert big > (1 << 64) - 1


def test_narrow_rate_width() -> None:
    # 22 * 9 = 198 needs 8 bits
    report = DiagnosticReport.from_text(SAMPLE_TEXT, rate_width=7)

    assert report.gamma_rate() == SAMPLE_GAMMA
    assert report.epsilon_rate() == SAMPLE_EPSILON
    with pytest.raises(RateOverflowError):
        report.energy_consumption()
    assert report.energy_consumption_big() == SAMPLE_ENERGY

    assert DiagnosticReport.from_text(SAMPLE_TEXT, rate_width=8).energy_consumption() == 198


def test_reading_longer_than_rate_width() -> None:
    """Reading length is not checked on assignment, only when rates are packed."""
    report = DiagnosticReport.from_text("1" * 65 + "\n" + "0" * 65)

    assert report.reading_length == 65
    assert len(report.column_counts) == 65
    with pytest.raises(ReadingWidthError) as exc_info:
        report.gamma_rate()
    assert (exc_info.value.reading_length, exc_info.value.width) == (65, 64)

    with pytest.raises(ReadingWidthError):
        report.epsilon_rate()
    with pytest.raises(ReadingWidthError):
        report.energy_consumption_big()


def test_summary_falls_back_to_big() -> None:
    summary = DiagnosticReport.from_text(WIDE_TEXT).summary()

    assert summary.big is True
    assert summary.energy_consumption == WIDE_GAMMA * WIDE_EPSILON


def test_summary_without_fallback_propagates_overflow() -> None:
    with pytest.raises(RateOverflowError):
        DiagnosticReport.from_text(WIDE_TEXT).summary(allow_big=False)
