"""Signing config selection per build variant."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

from hb.core.config import DebugSigningSettings
from hb.core.result import Err, Ok, Result

from .errors import DebugSignedRelease
from .resolver import Fallback, Resolution, Resolved

__all__ = [
    "BuildVariant",
    "SigningConfig",
    "SigningSource",
    "debug_signing_config",
    "select_signing_config",
    "enforce_release_signing",
]

type SigningSource = Literal["release", "debug"]


class BuildVariant(Enum):
    DEBUG = "debug"
    RELEASE = "release"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SigningConfig:
    """Concrete credentials handed to the build toolchain."""

    name: str
    store_file: Path
    key_alias: str
    store_password: str = field(repr=False)
    key_password: str = field(repr=False)
    source: SigningSource

    @property
    def is_debug(self) -> bool:
        return self.source == "debug"


def debug_signing_config(identity: DebugSigningSettings) -> SigningConfig:
    return SigningConfig(
        name="debug",
        store_file=identity.store_path(),
        key_alias=identity.key_alias,
        store_password=identity.store_password,
        key_password=identity.key_password,
        source="debug",
    )


def select_signing_config(
    variant: BuildVariant,
    resolution: Resolution,
    debug_identity: DebugSigningSettings,
) -> SigningConfig:
    """Pick the credentials a variant is signed with.

    Debug builds always use the debug identity. Release builds use the
    resolved profile, or fall back to the debug identity when none was found.
    """
    if variant is BuildVariant.DEBUG:
        return debug_signing_config(debug_identity)

    match resolution:
        case Resolved(profile=profile):
            # Resolved profiles are complete; the `or` only narrows types
            return SigningConfig(
                name="release",
                store_file=profile.store_file or Path(),
                key_alias=profile.key_alias or "",
                store_password=profile.store_password or "",
                key_password=profile.key_password or "",
                source="release",
            )
        case Fallback():
            return debug_signing_config(debug_identity)


def enforce_release_signing(
    variant: BuildVariant,
    config: SigningConfig,
    resolution: Resolution,
    *,
    allow_debug_signed_release: bool,
) -> Result[SigningConfig, DebugSignedRelease]:
    """Refuse a debug-signed release unless explicitly allowed."""
    if variant is BuildVariant.RELEASE and config.is_debug and not allow_debug_signed_release:
        reason = resolution.describe() if isinstance(resolution, Fallback) else "no release key"
        return Err(DebugSignedRelease(reason=reason))
    return Ok(config)
