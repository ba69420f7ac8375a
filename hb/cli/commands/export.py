from __future__ import annotations

from pathlib import Path

import typer

from hb.cli.commands._helpers import exit_with_code, signing_exit
from hb.cli.context import build_context
from hb.core.errors import ErrorCode
from hb.core.result import Err
from hb.platform.files import PRIVATE_MODE, atomic_write_text
from hb.services.signing import SigningService
from hb.signing.export import ExportFormat, render
from hb.signing.selection import BuildVariant


def export(
    variant: BuildVariant = typer.Option(
        BuildVariant.RELEASE,
        "--variant",
        case_sensitive=False,
        help="Build variant to export signing for.",
    ),
    fmt: ExportFormat = typer.Option(
        ExportFormat.GRADLE,
        "--format",
        case_sensitive=False,
        help="gradle: -P arguments, properties: gradle.properties lines, env: shell exports.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to a file (mode 600) instead of stdout.",
    ),
    allow_debug_release: bool = typer.Option(
        False,
        "--allow-debug-release",
        help="Sign a release with the debug key when no release key is configured.",
    ),
) -> None:
    """Export the selected signing config for the Gradle build."""
    ctx = build_context()
    service = SigningService(project=ctx.project, config=ctx.config)

    result = service.decide(variant, allow_debug_signed_release=allow_debug_release)
    if isinstance(result, Err):
        raise signing_exit(result.error, ctx)

    text = render(result.value.config, fmt)
    if output is None:
        typer.echo(text, nl=False)
        return

    # properties files are read back as ISO-8859-1; escape_property keeps them in range
    encoding = "latin-1" if fmt is ExportFormat.PROPERTIES else "utf-8"
    try:
        atomic_write_text(output, text, encoding=encoding, mode=PRIVATE_MODE)
    except OSError as e:
        ctx.console.error(f"cannot write {output}: {e}")
        raise exit_with_code(ErrorCode.IO_ERROR) from None
    ctx.console.success(f"wrote {output}")
