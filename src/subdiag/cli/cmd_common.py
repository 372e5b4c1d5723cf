# topmark:header:start
#
#   project      : SubDiag
#   file         : cmd_common.py
#   file_relpath : src/subdiag/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small helpers shared by the report commands: resolving the
effective config, building a report from input text, and translating model
errors into CLI errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from subdiag.cli.console import ClickConsole
from subdiag.cli.errors import SubdiagConfigError, SubdiagDataError, SubdiagOverflowError
from subdiag.cli.options import ColorMode, resolve_color_mode
from subdiag.config import Config, ConfigLoadError, MutableConfig
from subdiag.config.logging import get_logger
from subdiag.report import (
    DiagnosticError,
    DiagnosticReport,
    RateOverflowError,
    ReadingWidthError,
)

if TYPE_CHECKING:
    from subdiag.cli.console_api import ConsoleLike
    from subdiag.core.formats import OutputFormat
    from subdiag.report import ReportSummary

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the root group."""
    return ctx.find_root().obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity as a count of ``-v`` flags (0 when quiet)."""
    return int(ctx.find_root().obj.get("verbosity", 0))


def resolve_config_from_click(
    ctx: click.Context,
    *,
    rate_width: int | None,
    big_fallback: bool | None,
    output_format: OutputFormat | None,
) -> Config:
    """Build the effective Config: defaults, config files, then CLI overrides.

    Raises:
        SubdiagConfigError: If a config file is unreadable or holds invalid values.
    """
    root_obj: dict[str, Any] = ctx.find_root().obj
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=root_obj.get("config_files", ()),
            no_config=bool(root_obj.get("no_config", False)),
        )
        draft.apply_overrides(
            {
                "rate_width": rate_width,
                "big_fallback": big_fallback,
                "output_format": output_format.value if output_format is not None else None,
            }
        )
        config: Config = draft.freeze()
    except ConfigLoadError as exc:
        raise SubdiagConfigError(str(exc)) from exc
    except ValueError as exc:
        raise SubdiagConfigError(str(exc)) from exc

    apply_output_color(ctx, config.output_format)
    return config


def apply_output_color(ctx: click.Context, output_format: OutputFormat) -> None:
    """Re-resolve color for the effective output format and update the console.

    Machine formats never carry ANSI codes, even with ``--color=always``.
    """
    root = ctx.find_root()
    color_mode: ColorMode = root.obj.get("color_mode", ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=color_mode, output_format=output_format)
    if enable_color == root.obj.get("color_enabled"):
        return
    logger.debug("Output format %s: color %s", output_format.value, enable_color)
    root.obj["color_enabled"] = enable_color
    root.color = enable_color
    root.obj["console"] = ClickConsole(enable_color=enable_color)


def build_report(text: str, config: Config) -> DiagnosticReport:
    """Parse ``text`` into a validated report.

    Raises:
        SubdiagDataError: If the text is not a valid diagnostic matrix.
    """
    try:
        return DiagnosticReport.from_text(text, rate_width=config.rate_width)
    except DiagnosticError as exc:
        raise SubdiagDataError(str(exc)) from exc


def compute_energy(report: DiagnosticReport, config: Config) -> tuple[int, bool]:
    """Return the energy consumption and whether the big-integer path was used.

    The checked product is tried first; on overflow the arbitrary-precision
    product is returned instead, unless ``config.big_fallback`` is False.

    Raises:
        SubdiagOverflowError: If a value does not fit and no fallback applies.
    """
    try:
        return report.energy_consumption(), False
    except RateOverflowError as exc:
        if not config.big_fallback:
            raise SubdiagOverflowError(str(exc)) from exc
        logger.info("%s Using arbitrary precision.", exc)
        return report.energy_consumption_big(), True
    except ReadingWidthError as exc:
        raise SubdiagOverflowError(str(exc)) from exc


def compute_summary(report: DiagnosticReport, config: Config) -> ReportSummary:
    """Return the report summary, honoring ``config.big_fallback``.

    Raises:
        SubdiagOverflowError: If a value does not fit and no fallback applies.
    """
    try:
        return report.summary(allow_big=config.big_fallback)
    except (RateOverflowError, ReadingWidthError) as exc:
        raise SubdiagOverflowError(str(exc)) from exc
