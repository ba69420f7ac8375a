from __future__ import annotations

from hb.cli.commands._helpers import exit_with_code
from hb.cli.context import CLIContext, build_context
from hb.core.errors import ErrorCode
from hb.output.console import Style
from hb.services.check import CheckResult, CheckService, CheckStatus


def check() -> None:
    """Check signing credentials and dependency pins."""
    ctx = build_context()

    service = CheckService(project=ctx.project, config=ctx.config)
    report = service.run()

    ctx.console.print(f"project: {ctx.project.root}", Style.DIM)

    _print_group(ctx, "Signing", report.signing)
    _print_group(ctx, "Dependencies", report.dependencies)

    if report.has_errors():
        raise exit_with_code(ErrorCode.CONFIG_ERROR)


def _print_group(ctx: CLIContext, title: str, results: list[CheckResult]) -> None:
    console = ctx.console
    console.header(title)
    for r in results:
        style = _style_for_status(r.status)
        console.print(f"{r.name}: {r.message}", style)
        if r.hint and r.status != CheckStatus.OK:
            console.print(f"hint: {r.hint}", Style.DIM)


def _style_for_status(status: CheckStatus) -> Style:
    if status == CheckStatus.OK:
        return Style.SUCCESS
    if status == CheckStatus.WARNING:
        return Style.WARNING
    return Style.ERROR
