from __future__ import annotations

import typer

from hb.cli.commands._helpers import exit_with_code
from hb.cli.context import build_context
from hb.core.errors import ErrorCode
from hb.output.console import Style
from hb.platform.files import PRIVATE_MODE, atomic_write_text
from hb.signing.export import render_template


def template(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    """Write a key.properties template for the release key."""
    ctx = build_context()
    path = ctx.project.properties_path(ctx.config)

    if path.exists() and not force:
        ctx.console.error(f"{path} already exists")
        ctx.console.print("hint: pass --force to overwrite it", Style.DIM)
        raise exit_with_code(ErrorCode.USER_ERROR)

    try:
        atomic_write_text(path, render_template(), encoding="latin-1", mode=PRIVATE_MODE)
    except OSError as e:
        ctx.console.error(f"cannot write {path}: {e}")
        raise exit_with_code(ErrorCode.IO_ERROR) from None

    ctx.console.success(f"wrote {path}")
    ctx.console.print("fill in every field and keep the file out of version control", Style.DIM)
