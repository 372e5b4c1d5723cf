# topmark:header:start
#
#   project      : SubDiag
#   file         : version.py
#   file_relpath : src/subdiag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SubDiag `version` command.

Prints the current SubDiag version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from subdiag.cli.cli_types import EnumChoiceParam
from subdiag.cli.cmd_common import get_console
from subdiag.constants import SUBDIAG_VERSION
from subdiag.core.formats import OutputFormat

if TYPE_CHECKING:
    from subdiag.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SubDiag.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SubDiag.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    console: ConsoleLike = get_console(click.get_current_context())

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": SUBDIAG_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# SubDiag Version\n")
        console.print(f"**SubDiag version: {SUBDIAG_VERSION}**")
    else:
        console.print(console.styled(SUBDIAG_VERSION, bold=True))
