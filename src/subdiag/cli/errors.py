# topmark:header:start
#
#   project      : SubDiag
#   file         : errors.py
#   file_relpath : src/subdiag/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SubDiag CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Model errors from `subdiag.report.errors` are translated into
this family at the command boundary.
"""

from __future__ import annotations

from typing import IO, Any

import click

from subdiag.core.exit_codes import ExitCode


class SubdiagError(click.ClickException):
    """Base class for all SubDiag CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SubdiagUsageError(SubdiagError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SubdiagDataError(SubdiagError):
    """Error for malformed diagnostic input (bad bits, empty or ragged readings)."""

    exit_code = ExitCode.DATA_ERROR


class SubdiagFileNotFoundError(SubdiagError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SubdiagOverflowError(SubdiagError):
    """Error when a value overflows the rate width and no fallback applies."""

    exit_code = ExitCode.OVERFLOW_ERROR


class SubdiagIOError(SubdiagError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class SubdiagConfigError(SubdiagError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
