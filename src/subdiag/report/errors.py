# topmark:header:start
#
#   project      : SubDiag
#   file         : errors.py
#   file_relpath : src/subdiag/report/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the diagnostic report model.

The taxonomy has three families:

* **Invalid argument** (`InvalidDiagnosticDataError` and subclasses): the data
  is null, empty, or its readings do not share one length.
* **Out of range** (`BitOutOfRangeError`): a bit (or a parsed character) is not
  ``0`` or ``1``.
* **Overflow** (`RateOverflowError`, `ReadingWidthError`): a value does not fit
  the fixed rate width.

All exceptions derive from `DiagnosticError` and from the matching builtin
(`ValueError`, `TypeError`, `OverflowError`) so callers can catch either.
"""

from __future__ import annotations


class DiagnosticError(Exception):
    """Base class for all diagnostic report errors."""


class InvalidDiagnosticDataError(DiagnosticError, ValueError):
    """Diagnostic data was rejected by the report's data setter."""


class NullDiagnosticDataError(InvalidDiagnosticDataError, TypeError):
    """Diagnostic data is ``None``."""

    def __init__(self, message: str = "Diagnostic data must not be null.") -> None:
        super().__init__(message)


class EmptyDiagnosticDataError(InvalidDiagnosticDataError):
    """Diagnostic data has no readings, or its first reading has no bits."""

    def __init__(self, message: str = "Diagnostic data can not be empty.") -> None:
        super().__init__(message)


class DimensionMismatchError(InvalidDiagnosticDataError):
    """Readings do not all have the same number of bits."""

    def __init__(
        self,
        message: str = "Diagnostic data dimensions do not match.",
        *,
        index: int | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        if index is not None:
            message = (
                f"{message} Reading {index + 1} has {actual} bit(s), expected {expected}."
            )
        super().__init__(message)
        self.index = index
        self.expected = expected
        self.actual = actual


class BitOutOfRangeError(DiagnosticError, ValueError):
    """A bit or parsed character is not ``0`` or ``1``.

    Attributes:
        line (int | None): 1-based reading (line) number, if known.
        column (int | None): 1-based bit position within the reading, if known.
        value (object): The offending value.
    """

    def __init__(
        self,
        message: str = "Diagnostic bits should be 0 or 1.",
        *,
        line: int | None = None,
        column: int | None = None,
        value: object = None,
    ) -> None:
        if line is not None and column is not None:
            message = f"{message} Got {value!r} at line {line}, column {column}."
        super().__init__(message)
        self.line = line
        self.column = column
        self.value = value


class RateOverflowError(DiagnosticError, OverflowError):
    """The checked energy consumption product exceeds the rate width.

    Use `DiagnosticReport.energy_consumption_big` to obtain the exact value.
    """

    def __init__(self, gamma: int, epsilon: int, width: int) -> None:
        super().__init__(
            f"Energy consumption {gamma} * {epsilon} overflows an unsigned {width}-bit integer."
        )
        self.gamma = gamma
        self.epsilon = epsilon
        self.width = width


class ReadingWidthError(DiagnosticError, OverflowError):
    """The reading length exceeds the number of bits a rate can hold."""

    def __init__(self, reading_length: int, width: int) -> None:
        super().__init__(
            f"Reading length {reading_length} exceeds supported width of {width} bits."
        )
        self.reading_length = reading_length
        self.width = width
