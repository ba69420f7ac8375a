from __future__ import annotations

import typer

from hb.cli.commands._helpers import signing_exit
from hb.cli.context import CLIContext, build_context
from hb.core.result import Err
from hb.output.console import Style
from hb.services.signing import SigningDecision, SigningService
from hb.signing.profile import mask
from hb.signing.resolver import Fallback, Resolved
from hb.signing.selection import BuildVariant


def resolve(
    variant: BuildVariant = typer.Option(
        BuildVariant.RELEASE,
        "--variant",
        case_sensitive=False,
        help="Build variant to resolve signing for.",
    ),
    allow_debug_release: bool = typer.Option(
        False,
        "--allow-debug-release",
        help="Sign a release with the debug key when no release key is configured.",
    ),
) -> None:
    """Show which credentials a build variant is signed with."""
    ctx = build_context()
    service = SigningService(project=ctx.project, config=ctx.config)

    result = service.decide(variant, allow_debug_signed_release=allow_debug_release)
    if isinstance(result, Err):
        raise signing_exit(result.error, ctx)

    print_decision(ctx, result.value)


def print_decision(ctx: CLIContext, decision: SigningDecision) -> None:
    console = ctx.console
    console.print(f"project: {ctx.project.root}", Style.DIM)

    match decision.resolution:
        case Resolved():
            resolution = "resolved"
        case Fallback() as fallback:
            resolution = f"fallback ({fallback.describe()})"
        case None:
            resolution = "not consulted"

    config = decision.config
    console.field("variant", str(decision.variant))
    console.field("release key", resolution)
    console.field("signing config", f"{config.name} ({config.source})")
    console.field("store file", str(config.store_file))
    console.field("store password", mask(config.store_password))
    console.field("key alias", config.key_alias)
    console.field("key password", mask(config.key_password))

    if decision.variant is BuildVariant.RELEASE and config.is_debug:
        console.warning("release build will be signed with the debug key")
