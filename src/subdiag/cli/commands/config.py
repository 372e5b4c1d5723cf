# topmark:header:start
#
#   project      : SubDiag
#   file         : config.py
#   file_relpath : src/subdiag/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SubDiag `config` command.

Prints the effective configuration (defaults, config files and CLI overrides
merged) as a TOML document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subdiag.cli.cmd_common import get_console, resolve_config_from_click
from subdiag.cli.options import common_report_options
from subdiag.config.io import to_toml

if TYPE_CHECKING:
    from subdiag.cli.console_api import ConsoleLike
    from subdiag.core.formats import OutputFormat


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@common_report_options
def config_command(
    *,
    rate_width: int | None = None,
    big_fallback: bool | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Print the merged configuration.

    Args:
        rate_width (int | None): Rate width override.
        big_fallback (bool | None): Overflow fallback override.
        output_format (OutputFormat | None): Output format override.
    """
    ctx = click.get_current_context()
    config = resolve_config_from_click(
        ctx, rate_width=rate_width, big_fallback=big_fallback, output_format=output_format
    )
    console: ConsoleLike = get_console(ctx)

    console.print("# Sources: " + ", ".join(str(p) for p in config.config_files))
    console.print(to_toml(config.to_toml_dict()), nl=False)
