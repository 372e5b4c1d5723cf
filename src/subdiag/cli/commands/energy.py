# topmark:header:start
#
#   project      : SubDiag
#   file         : energy.py
#   file_relpath : src/subdiag/cli/commands/energy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SubDiag `energy` command.

Reads a diagnostic report (one binary string per line) from a file or STDIN
and prints its energy consumption as plain decimal digits. When the value
overflows the rate width, the arbitrary-precision value is printed instead,
in the same format.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from subdiag.cli.cmd_common import (
    build_report,
    compute_energy,
    get_console,
    get_effective_verbosity,
    resolve_config_from_click,
)
from subdiag.cli.io import read_input_text
from subdiag.cli.options import common_report_options
from subdiag.core.formats import OutputFormat

if TYPE_CHECKING:
    from subdiag.cli.console_api import ConsoleLike


@click.command(
    name="energy",
    help="Print the energy consumption (gamma rate x epsilon rate) of a diagnostic report.",
)
@click.argument("source", required=False, metavar="[PATH|-]")
@common_report_options
def energy_command(
    *,
    source: str | None = None,
    rate_width: int | None = None,
    big_fallback: bool | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Print the energy consumption of the report read from SOURCE (default: STDIN).

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
    value, big = compute_energy(report, config)

    fmt: OutputFormat = config.output_format
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"energy_consumption": value, "big": big}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print(f"**Energy consumption:** {value}")
    else:
        console.print(str(value))
        if big and get_effective_verbosity(ctx) > 0:
            console.warn(
                f"Energy consumption exceeds {config.rate_width} bits; "
                "computed with arbitrary precision."
            )
