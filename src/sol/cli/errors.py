"""
Sol CLI Error Reporting
=======================

Maps the failures a sol tool can hit while reading and scanning a source
file onto an exit code and a one-line (or, for syntax errors, caret
annotated) message on stderr.

| Failure                              | Exit code      |
|--------------------------------------|----------------|
| SolSyntaxError (e.g. --strict)       | SOURCE_ERROR   |
| other SolError                       | SOURCE_ERROR   |
| source file missing / unreadable     | INVALID_ARGS   |
| source file not UTF-8                | INVALID_ARGS   |
| anything else                        | INTERNAL_ERROR |
"""

import sys
import traceback
from enum import IntEnum
from pathlib import Path
from typing import NoReturn, Optional

import click

from sol.errors import SolError, SolSyntaxError


class ExitCode(IntEnum):
    """Exit codes shared by the sol tools."""
    SUCCESS = 0
    SOURCE_ERROR = 1     # Source rejected, e.g. INVALID token under --strict
    INVALID_ARGS = 2     # Bad arguments, or a source file that cannot be read
    INTERNAL_ERROR = 3   # Bug in the toolkit


def describe_cli_error(
    error: Exception,
    source_path: Optional[Path] = None,
) -> tuple[ExitCode, str]:
    """
    Choose the exit code and stderr message for `error`.

    Args:
        error: The exception raised while running the tool
        source_path: The sol source file being processed, if any

    Returns:
        (exit code, message)
    """
    where = f"'{source_path}'" if source_path is not None else "source file"

    if isinstance(error, SolSyntaxError):
        # Carries its own "file:line:col: error:" prefix and caret
        return ExitCode.SOURCE_ERROR, str(error)

    if isinstance(error, SolError):
        return ExitCode.SOURCE_ERROR, f"error: {error}"

    if isinstance(error, UnicodeDecodeError):
        return ExitCode.INVALID_ARGS, (
            f"error: {where} is not UTF-8 text "
            f"(byte 0x{error.object[error.start]:02X} at offset {error.start})"
        )

    if isinstance(error, IsADirectoryError):
        return ExitCode.INVALID_ARGS, f"error: {where} is a directory"

    if isinstance(error, (FileNotFoundError, PermissionError)):
        return ExitCode.INVALID_ARGS, f"error: cannot read {where}: {error.strerror}"

    if isinstance(error, click.BadParameter):
        return ExitCode.INVALID_ARGS, f"error: {error}"

    return ExitCode.INTERNAL_ERROR, f"internal error: {error!r}"


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    source_path: Optional[Path] = None,
) -> NoReturn:
    """
    Report `error` on stderr and exit with the matching ExitCode.

    Tracebacks are printed only for internal errors in verbose mode.
    """
    code, message = describe_cli_error(error, source_path)
    click.echo(message, err=True)
    if code is ExitCode.INTERNAL_ERROR and verbose:
        traceback.print_exc()
    sys.exit(code)
