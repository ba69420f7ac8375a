from __future__ import annotations

from dataclasses import dataclass

import typer

from hb.core.config import Config, load_config_or_default
from hb.core.errors import ErrorCode
from hb.core.project import AndroidProject, detect_project
from hb.core.result import Err
from hb.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: AndroidProject
    config: Config
    console: ConsoleProtocol


def build_context() -> CLIContext:
    """Detect the project and load hb.toml once for this invocation."""
    project_result = detect_project()
    if isinstance(project_result, Err):
        typer.echo(f"error: {project_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    project = project_result.value
    config_result = load_config_or_default(project.config_path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return CLIContext(
        project=project,
        config=config_result.value,
        console=RichConsole(),
    )
