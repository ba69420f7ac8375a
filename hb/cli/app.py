from __future__ import annotations

import os
from pathlib import Path

import typer

from hb import __version__
from hb.cli.commands.check import check
from hb.cli.commands.describe import describe
from hb.cli.commands.export import export
from hb.cli.commands.resolve import resolve
from hb.cli.commands.template import template
from hb.core.errors import ErrorCode
from hb.core.project import PROJECT_ENV_VAR, project_root_at


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(resolve)
app.command()(export)
app.command()(check)
app.command()(describe)
app.command()(template)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
    project: Path | None = typer.Option(
        None,
        "--project",
        help="Android project root (overrides auto detection)",
    ),
) -> None:
    if project is None:
        return

    try:
        path = project.expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --project: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    root = project_root_at(path) if path.is_dir() else None
    if root is None:
        typer.echo(
            f"error: --project '{path}' is not an Android project (missing settings.gradle)",
            err=True,
        )
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    os.environ[PROJECT_ENV_VAR] = str(root)


def main() -> None:
    app()
