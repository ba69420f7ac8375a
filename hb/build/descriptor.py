"""Static build descriptor of the hashtara Android app.

Declarative data mirrored from ``android/app/build.gradle.kts``: identifiers,
SDK levels, manifest placeholders and the pinned dependency coordinates. None
of it is interpreted here beyond validation; the Gradle toolchain consumes it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from hb.core.config import AppOverrides

__all__ = [
    "BuildDescriptor",
    "Dependency",
    "DependencyIssue",
    "DEPENDENCIES",
    "NOTIFICATION_CHANNEL_KEY",
    "NOTIFICATION_ICON_KEY",
    "parse_coordinate",
    "validate_dependencies",
]

NOTIFICATION_CHANNEL_KEY = "com.google.firebase.messaging.default_notification_channel_id"
NOTIFICATION_ICON_KEY = "com.google.firebase.messaging.default_notification_icon"

_COORDINATE_PART = re.compile(r"^[A-Za-z0-9_.\-]+$")


@dataclass(frozen=True, slots=True)
class Dependency:
    """A Maven coordinate declared in a Gradle configuration."""

    configuration: str
    group: str
    artifact: str
    version: str | None = None
    platform: bool = False

    @property
    def coordinate(self) -> str:
        base = f"{self.group}:{self.artifact}"
        return f"{base}:{self.version}" if self.version else base

    @property
    def notation(self) -> str:
        """Kotlin DSL notation, e.g. ``implementation("g:a:v")``."""
        inner = f'"{self.coordinate}"'
        if self.platform:
            inner = f"platform({inner})"
        return f"{self.configuration}({inner})"


def parse_coordinate(
    text: str,
    *,
    configuration: str = "implementation",
    platform: bool = False,
) -> Dependency:
    """Parse ``group:artifact[:version]``.

    Raises:
        ValueError: Wrong number of parts or invalid characters.
    """
    parts = text.strip().split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"expected group:artifact[:version], got '{text}'")
    for part in parts:
        if not _COORDINATE_PART.match(part):
            raise ValueError(f"invalid coordinate part '{part}' in '{text}'")
    version = parts[2] if len(parts) == 3 else None
    return Dependency(
        configuration=configuration,
        group=parts[0],
        artifact=parts[1],
        version=version,
        platform=platform,
    )


DEPENDENCIES: tuple[Dependency, ...] = (
    parse_coordinate("com.google.firebase:firebase-bom:32.3.1", platform=True),
    parse_coordinate("com.google.firebase:firebase-analytics-ktx"),
    parse_coordinate("com.google.firebase:firebase-auth-ktx"),
    parse_coordinate("com.google.android.gms:play-services-auth:20.6.0"),
    parse_coordinate("androidx.multidex:multidex:2.0.1"),
    parse_coordinate(
        "com.android.tools:desugar_jdk_libs:2.1.5",
        configuration="coreLibraryDesugaring",
    ),
    parse_coordinate("com.google.firebase:firebase-messaging:23.3.1"),
)


@dataclass(frozen=True, slots=True)
class DependencyIssue:
    dependency: Dependency
    message: str
    is_error: bool = False


def validate_dependencies(deps: tuple[Dependency, ...] = DEPENDENCIES) -> list[DependencyIssue]:
    """Check version pinning against the declared BoM platforms.

    - an artifact of a BoM group without a version is fine only if a BoM for
      that group is declared
    - pinning a version next to a BoM is allowed but overrides the BoM
    - any other artifact must pin a version
    """
    issues: list[DependencyIssue] = []
    bom_groups = {d.group for d in deps if d.platform}

    seen: set[tuple[str, str]] = set()
    for dep in deps:
        key = (dep.group, dep.artifact)
        if key in seen:
            issues.append(DependencyIssue(dep, "declared more than once", is_error=True))
        seen.add(key)

        if dep.platform:
            if dep.version is None:
                issues.append(DependencyIssue(dep, "platform needs a version", is_error=True))
            continue

        if dep.version is None and dep.group not in bom_groups:
            issues.append(DependencyIssue(dep, "no version and no BoM manages it", is_error=True))
        elif dep.version is not None and dep.group in bom_groups:
            issues.append(DependencyIssue(dep, "pins a version that overrides the BoM"))
    return issues


@dataclass(frozen=True, slots=True)
class BuildDescriptor:
    namespace: str = "com.hashtara.app"
    application_id: str = "com.hashtara.app"
    min_sdk: int = 23
    ndk_version: str = "27.0.12077973"
    java_version: str = "11"
    multidex: bool = True
    core_library_desugaring: bool = True
    minify_release: bool = False
    shrink_resources_release: bool = False
    notification_channel_id: str = "hashtara_notifications"
    notification_icon: str = "@mipmap/ic_launcher"
    dependencies: tuple[Dependency, ...] = DEPENDENCIES

    @classmethod
    def from_overrides(cls, overrides: AppOverrides) -> BuildDescriptor:
        descriptor = cls()
        changes: dict[str, object] = {
            name: value
            for name, value in (
                ("application_id", overrides.application_id),
                ("namespace", overrides.namespace),
                ("min_sdk", overrides.min_sdk),
                ("ndk_version", overrides.ndk_version),
                ("notification_channel_id", overrides.notification_channel_id),
                ("notification_icon", overrides.notification_icon),
            )
            if value is not None
        }
        return replace(descriptor, **changes)

    def manifest_placeholders(self) -> dict[str, str]:
        return {
            NOTIFICATION_CHANNEL_KEY: self.notification_channel_id,
            NOTIFICATION_ICON_KEY: self.notification_icon,
        }
