# topmark:header:start
#
#   project      : SubDiag
#   file         : __init__.py
#   file_relpath : src/subdiag/report/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic report: parsing, validation and rate derivation.

Public entry points:

- [`DiagnosticReport`][subdiag.report.model.DiagnosticReport]
- [`data_from_text`][subdiag.report.parser.data_from_text]
- the exceptions in `subdiag.report.errors`
"""

from __future__ import annotations

from subdiag.report.errors import (
    BitOutOfRangeError,
    DiagnosticError,
    DimensionMismatchError,
    EmptyDiagnosticDataError,
    InvalidDiagnosticDataError,
    NullDiagnosticDataError,
    RateOverflowError,
    ReadingWidthError,
)
from subdiag.report.model import DiagnosticData, DiagnosticReport, ReportSummary
from subdiag.report.parser import data_from_text

__all__ = [
    "BitOutOfRangeError",
    "DiagnosticData",
    "DiagnosticError",
    "DiagnosticReport",
    "DimensionMismatchError",
    "EmptyDiagnosticDataError",
    "InvalidDiagnosticDataError",
    "NullDiagnosticDataError",
    "RateOverflowError",
    "ReadingWidthError",
    "ReportSummary",
    "data_from_text",
]
