"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from hb.core.errors import ErrorCode
from hb.output.errors import print_signing_error, signing_error_exit_code

if TYPE_CHECKING:
    from hb.cli.context import CLIContext
    from hb.signing.errors import SigningConfigError


def signing_exit(error: SigningConfigError, ctx: CLIContext) -> typer.Exit:
    """Print ``error`` and build the matching exit.

    Usage: ``raise signing_exit(error, ctx)``
    """
    print_signing_error(error, ctx.console)
    return typer.Exit(code=signing_error_exit_code(error))


def exit_with_code(code: ErrorCode) -> typer.Exit:
    return typer.Exit(code=int(code))
