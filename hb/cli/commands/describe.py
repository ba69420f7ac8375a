from __future__ import annotations

from hb.build.descriptor import BuildDescriptor
from hb.cli.context import build_context


def describe() -> None:
    """Print the static build descriptor."""
    ctx = build_context()
    console = ctx.console
    descriptor = BuildDescriptor.from_overrides(ctx.config.app)

    console.header("Application")
    console.field("namespace", descriptor.namespace)
    console.field("application id", descriptor.application_id)
    console.field("min sdk", str(descriptor.min_sdk))
    console.field("ndk", descriptor.ndk_version)
    console.field("java", descriptor.java_version)
    console.field("multidex", _on_off(descriptor.multidex))
    console.field("desugaring", _on_off(descriptor.core_library_desugaring))
    console.field("release minify", _on_off(descriptor.minify_release))
    console.field("release shrink", _on_off(descriptor.shrink_resources_release))

    console.header("Manifest placeholders")
    for key, value in descriptor.manifest_placeholders().items():
        console.print(f"{key} = {value}")

    console.header("Dependencies")
    for dep in descriptor.dependencies:
        console.print(dep.notation)


def _on_off(flag: bool) -> str:
    return "on" if flag else "off"
