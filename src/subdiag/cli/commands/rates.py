# topmark:header:start
#
#   project      : SubDiag
#   file         : rates.py
#   file_relpath : src/subdiag/cli/commands/rates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SubDiag `rates` command.

Prints every value derived from a diagnostic report: its dimensions, the
gamma and epsilon rates (decimal and binary) and the energy consumption.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from subdiag.cli.cmd_common import (
    build_report,
    compute_summary,
    get_console,
    resolve_config_from_click,
)
from subdiag.cli.io import read_input_text
from subdiag.cli.options import common_report_options
from subdiag.core.formats import OutputFormat

if TYPE_CHECKING:
    from subdiag.cli.console_api import ConsoleLike
    from subdiag.report import ReportSummary


def _binary(value: int, width: int) -> str:
    return format(value, f"0{width}b")


def render_summary_text(summary: ReportSummary, console: ConsoleLike) -> None:
    """Render a summary as aligned ``label: value`` lines."""
    width = summary.reading_length
    rows: list[tuple[str, str]] = [
        ("Readings", f"{summary.reading_count} x {width} bit(s)"),
        ("Gamma rate", f"{summary.gamma_rate} ({_binary(summary.gamma_rate, width)})"),
        ("Epsilon rate", f"{summary.epsilon_rate} ({_binary(summary.epsilon_rate, width)})"),
        ("Energy consumption", str(summary.energy_consumption)),
    ]
    label_width = max(len(label) for label, _ in rows)
    for label, value in rows:
        console.print(f"{console.styled(label.ljust(label_width), bold=True)} : {value}")


def render_summary_markdown(summary: ReportSummary, console: ConsoleLike) -> None:
    """Render a summary as a Markdown table."""
    width = summary.reading_length
    console.print("# Diagnostic Report\n")
    console.print("| Value | Decimal | Binary |")
    console.print("| --- | ---: | --- |")
    console.print(
        f"| Gamma rate | {summary.gamma_rate} | `{_binary(summary.gamma_rate, width)}` |"
    )
    console.print(
        f"| Epsilon rate | {summary.epsilon_rate} | `{_binary(summary.epsilon_rate, width)}` |"
    )
    console.print(f"| Energy consumption | {summary.energy_consumption} | |")


@click.command(
    name="rates",
    help="Print the gamma rate, epsilon rate and energy consumption of a diagnostic report.",
)
@click.argument("source", required=False, metavar="[PATH|-]")
@common_report_options
def rates_command(
    *,
    source: str | None = None,
    rate_width: int | None = None,
    big_fallback: bool | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Print the rates of the report read from SOURCE (default: STDIN).

    Args:
        source (str | None): Input file path, ``-`` or None for STDIN.
        rate_width (int | None): Rate width override.
        big_fallback (bool | None): Overflow fallback override.
        output_format (OutputFormat | None): Output format override.
    """
    ctx = click.get_current_context()
    config = resolve_config_from_click(
        ctx, rate_width=rate_width, big_fallback=big_fallback, output_format=output_format
    )
    console: ConsoleLike = get_console(ctx)

    report = build_report(read_input_text(source), config)
    summary = compute_summary(report, config)

    if config.output_format == OutputFormat.JSON:
        console.print(json.dumps(summary.to_dict()))
    elif config.output_format == OutputFormat.MARKDOWN:
        render_summary_markdown(summary, console)
    else:
        render_summary_text(summary, console)
