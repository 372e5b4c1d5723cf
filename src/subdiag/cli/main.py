# topmark:header:start
#
#   project      : SubDiag
#   file         : main.py
#   file_relpath : src/subdiag/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SubDiag Click CLI.

Group-level options are initialized once and placed into ``ctx.obj``.
Invoked without a subcommand, the CLI behaves like ``subdiag energy``: it reads
the diagnostic report from STDIN and prints its energy consumption.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from subdiag.cli.commands.config import config_command
from subdiag.cli.commands.energy import energy_command
from subdiag.cli.commands.rates import rates_command
from subdiag.cli.commands.version import version_command
from subdiag.cli.console import ClickConsole
from subdiag.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from subdiag.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, config sources) on the context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_files (tuple[Path, ...]): Extra config files from ``--config``.
        no_config (bool): Whether local config discovery is disabled.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity"] = verbose
    ctx.obj["verbosity_level"] = level_cli

    # The environment wins; -v flags only raise logging when explicitly given
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else (level_cli if verbose else None)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    ctx.obj["color_mode"] = effective_color_mode
    # Commands re-resolve once the output format is known
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["config_files"] = config_files
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SubDiag: derive gamma/epsilon rates and energy consumption from diagnostic reports.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the SubDiag CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(energy_command)


cli.add_command(energy_command)

cli.add_command(rates_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
