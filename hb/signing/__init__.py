"""Release signing: credentials loading, resolution and selection."""

from .errors import (
    DebugSignedRelease,
    FileNotFound,
    MalformedProperties,
    MissingField,
    SigningConfigError,
    StoreFileNotFound,
    UnreadableFile,
)
from .profile import SigningProfile
from .resolver import Fallback, Resolution, Resolved, load_signing_profile, resolve_signing_profile
from .selection import (
    BuildVariant,
    SigningConfig,
    enforce_release_signing,
    select_signing_config,
)

__all__ = [
    # errors
    "DebugSignedRelease",
    "FileNotFound",
    "MalformedProperties",
    "MissingField",
    "SigningConfigError",
    "StoreFileNotFound",
    "UnreadableFile",
    # profile
    "SigningProfile",
    # resolver
    "Fallback",
    "Resolution",
    "Resolved",
    "load_signing_profile",
    "resolve_signing_profile",
    # selection
    "BuildVariant",
    "SigningConfig",
    "enforce_release_signing",
    "select_signing_config",
]
