# topmark:header:start
#
#   project      : SubDiag
#   file         : model.py
#   file_relpath : src/subdiag/report/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic report model.

A [`DiagnosticReport`][subdiag.report.model.DiagnosticReport] owns a matrix
of bits (the *diagnostic data*): a sequence of readings (rows), each a fixed
length sequence of ``0``/``1`` values. From it the report derives:

* the **gamma rate**: for each column, 1 if more than ``N // 2`` readings have
  a 1-bit there, else 0;
* the **epsilon rate**: for each column, 1 if fewer than ``N // 2`` readings
  have a 1-bit there, else 0;
* the **energy consumption**: gamma times epsilon.

Rates are unsigned integers of a fixed width (64 bits by default). The
checked energy consumption raises on overflow; the ``*_big`` variant returns
the exact product.

Sections:
    * DiagnosticData: type alias for the bit matrix.
    * ReportSummary: immutable snapshot of all derived values.
    * DiagnosticReport: validated data plus lazily cached column counts.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from subdiag.config.logging import get_logger
from subdiag.constants import DEFAULT_RATE_WIDTH
from subdiag.report.bits import checked_mul, pack_bits, vote_bits
from subdiag.report.errors import (
    BitOutOfRangeError,
    DimensionMismatchError,
    EmptyDiagnosticDataError,
    NullDiagnosticDataError,
    RateOverflowError,
)
from subdiag.report.parser import data_from_text

if TYPE_CHECKING:
    from subdiag.config.logging import SubdiagLogger

logger: SubdiagLogger = get_logger(__name__)

DiagnosticData: TypeAlias = Sequence[Sequence[int]]


@dataclass(frozen=True)
class ReportSummary:
    """All values derived from one diagnostic report.

    Attributes:
        reading_length (int): Number of bits per reading.
        reading_count (int): Number of readings.
        gamma_rate (int): Majority-bit rate.
        epsilon_rate (int): Minority-bit rate.
        energy_consumption (int): ``gamma_rate * epsilon_rate``.
        big (bool): True if the product overflowed the rate width and was
            computed with arbitrary precision instead.
    """

    reading_length: int
    reading_count: int
    gamma_rate: int
    epsilon_rate: int
    energy_consumption: int
    big: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this summary."""
        return {
            "reading_length": self.reading_length,
            "reading_count": self.reading_count,
            "gamma_rate": self.gamma_rate,
            "epsilon_rate": self.epsilon_rate,
            "energy_consumption": self.energy_consumption,
            "big": self.big,
        }


class DiagnosticReport:
    """Validated diagnostic data with derived rates.

    Args:
        data (Sequence[Sequence[int]] | None): The diagnostic data.
        rate_width (int): Width in bits of the gamma and epsilon rates and of
            the checked energy consumption.

    Raises:
        ValueError: If ``rate_width`` is not a positive integer.
    """

    def __init__(
        self,
        data: DiagnosticData | None,
        *,
        rate_width: int = DEFAULT_RATE_WIDTH,
    ) -> None:
        if isinstance(rate_width, bool) or not isinstance(rate_width, int) or rate_width < 1:
            raise ValueError(f"Rate width must be a positive integer, got {rate_width!r}.")
        self._rate_width: int = rate_width
        self._data: tuple[tuple[int, ...], ...] = ()
        self._reading_length: int = 0
        self._reading_count: int = 0
        self._column_counts: tuple[int, ...] | None = None
        self.data = data

    @classmethod
    def from_text(cls, text: str, *, rate_width: int = DEFAULT_RATE_WIDTH) -> DiagnosticReport:
        """Instantiate a report from text, one binary string per line.

        Raises:
            BitOutOfRangeError: If the text contains characters other than ``0``/``1``.
            InvalidDiagnosticDataError: If the parsed data is empty or ragged.
        """
        return cls(data_from_text(text), rate_width=rate_width)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(reading_count={self._reading_count}, "
            f"reading_length={self._reading_length}, rate_width={self._rate_width})"
        )

    # ------------------------------ Data ------------------------------

    @property
    def data(self) -> tuple[tuple[int, ...], ...]:
        """The diagnostic data, as an immutable copy of what was assigned.

        Assigning validates the new data, in this order:

        1. ``None`` raises `NullDiagnosticDataError`.
        2. No readings, or a first reading without bits, raises
           `EmptyDiagnosticDataError`.
        3. A reading whose length differs from the first raises
           `DimensionMismatchError`.
        4. A bit other than ``0``/``1`` raises `BitOutOfRangeError`.

        On failure the previously installed data is kept.
        """
        return self._data

    @data.setter
    def data(self, value: DiagnosticData | None) -> None:
        if value is None:
            raise NullDiagnosticDataError()

        readings: tuple[tuple[int, ...], ...] = tuple(tuple(reading) for reading in value)
        reading_length: int = len(readings[0]) if readings else 0
        reading_count: int = len(readings)
        if reading_length == 0 or reading_count == 0:
            raise EmptyDiagnosticDataError()

        for index, reading in enumerate(readings):
            if len(reading) != reading_length:
                raise DimensionMismatchError(
                    index=index, expected=reading_length, actual=len(reading)
                )

        for line_no, reading in enumerate(readings, start=1):
            for col_no, bit in enumerate(reading, start=1):
                if bit != 0 and bit != 1:
                    raise BitOutOfRangeError(line=line_no, column=col_no, value=bit)

        self._data = tuple(tuple(int(bit) for bit in reading) for reading in readings)
        self._reading_length = reading_length
        self._reading_count = reading_count
        # Recomputed on next access
        self._column_counts = None
        logger.debug(
            "Installed diagnostic data: %d reading(s) of %d bit(s)",
            reading_count,
            reading_length,
        )

    @property
    def reading_length(self) -> int:
        """The number of bits in every reading."""
        return self._reading_length

    @property
    def reading_count(self) -> int:
        """The number of readings (rows) in the diagnostic data."""
        return self._reading_count

    @property
    def rate_width(self) -> int:
        """The width in bits of the rates and of the checked energy consumption."""
        return self._rate_width

    @property
    def column_counts(self) -> tuple[int, ...]:
        """Per-position count of 1-bits across all readings.

        Has one entry per bit of a reading. Computed on first access and cached
        until new data is assigned.
        """
        if self._column_counts is not None:
            return self._column_counts

        counts: list[int] = [0] * self._reading_length
        for reading in self._data:
            for i, bit in enumerate(reading):
                counts[i] += bit

        self._column_counts = tuple(counts)
        logger.trace("Computed column counts: %s", self._column_counts)
        return self._column_counts

    # ------------------------------ Rates ------------------------------

    def gamma_rate(self) -> int:
        """Return the gamma rate.

        For every bit position, the gamma bit is 1 if the number of readings
        with a 1 at that position is larger than half the reading count
        (``count > N // 2``), else 0. Bits are packed most significant first.

        Raises:
            ReadingWidthError: If the reading length exceeds the rate width.
        """
        bits = vote_bits(self.column_counts, self._reading_count // 2, majority=True)
        return pack_bits(bits, self._rate_width)

    def epsilon_rate(self) -> int:
        """Return the epsilon rate.

        For every bit position, the epsilon bit is 1 if the number of readings
        with a 1 at that position is smaller than half the reading count
        (``count < N // 2``), else 0. A count of exactly ``N // 2`` gives 0 in
        both rates, so epsilon is not always the complement of gamma.

        Raises:
            ReadingWidthError: If the reading length exceeds the rate width.
        """
        bits = vote_bits(self.column_counts, self._reading_count // 2, majority=False)
        return pack_bits(bits, self._rate_width)

    def energy_consumption(self) -> int:
        """Return gamma rate times epsilon rate, checked against the rate width.

        Raises:
            RateOverflowError: If the product does not fit the rate width.
                Use `energy_consumption_big` to deal with large values.
        """
        return checked_mul(self.gamma_rate(), self.epsilon_rate(), self._rate_width)

    def energy_consumption_big(self) -> int:
        """Return gamma rate times epsilon rate with arbitrary precision."""
        return self.gamma_rate() * self.epsilon_rate()

    def summary(self, *, allow_big: bool = True) -> ReportSummary:
        """Return a snapshot of all derived values.

        Args:
            allow_big (bool): If True, fall back to `energy_consumption_big`
                when the checked product overflows.

        Returns:
            ReportSummary: The derived values.

        Raises:
            RateOverflowError: If the product overflows and ``allow_big`` is False.
        """
        big = False
        try:
            energy = self.energy_consumption()
        except RateOverflowError as exc:
            if not allow_big:
                raise
            logger.info("%s Falling back to arbitrary precision.", exc)
            energy = self.energy_consumption_big()
            big = True

        return ReportSummary(
            reading_length=self._reading_length,
            reading_count=self._reading_count,
            gamma_rate=self.gamma_rate(),
            epsilon_rate=self.epsilon_rate(),
            energy_consumption=energy,
            big=big,
        )
