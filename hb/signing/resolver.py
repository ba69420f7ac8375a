"""Build signing resolver.

Decides, once per build invocation, whether release credentials are
available. The outcome is an explicit two-variant value so callers have to
acknowledge which branch occurred:

    match resolve_signing_profile(path, app_dir):
        case Ok(Resolved(profile)):
            ...  # sign with the operator's key
        case Ok(Fallback(reason=reason)):
            ...  # no usable release key, debug identity applies
        case Err(error):
            ...  # fatal configuration problem

A missing ``key.properties`` is a supported state (local and CI debug builds
run without it) and never produces an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from hb.core.config import PartialProfilePolicy
from hb.core.result import Err, Ok, Result

from .errors import (
    FileNotFound,
    MalformedProperties,
    MissingField,
    SigningConfigError,
    StoreFileNotFound,
    UnreadableFile,
)
from .profile import SigningProfile
from .properties import read_properties

__all__ = [
    "Resolved",
    "Fallback",
    "FallbackReason",
    "Resolution",
    "load_signing_profile",
    "resolve_signing_profile",
]

type FallbackReason = Literal["file-not-found", "incomplete", "store-file-missing"]


@dataclass(frozen=True, slots=True)
class Resolved:
    """A complete release profile was found."""

    profile: SigningProfile


@dataclass(frozen=True, slots=True)
class Fallback:
    """No usable release profile; the debug identity applies."""

    reason: FallbackReason
    path: Path
    missing: tuple[str, ...] = ()

    def describe(self) -> str:
        match self.reason:
            case "file-not-found":
                return f"{self.path} not found"
            case "incomplete":
                return f"{self.path} is missing {', '.join(self.missing)}"
            case "store-file-missing":
                return f"key store referenced by {self.path} does not exist"


type Resolution = Resolved | Fallback


def load_signing_profile(
    path: Path,
    base_dir: Path,
) -> Result[SigningProfile, FileNotFound | UnreadableFile | MalformedProperties]:
    """Read the properties file into a possibly partial profile."""
    entries = read_properties(path)
    if isinstance(entries, Err):
        return entries
    return Ok(SigningProfile.from_properties(entries.value, base_dir))


def resolve_signing_profile(
    path: Path,
    base_dir: Path,
    *,
    partial_profile: PartialProfilePolicy = "error",
) -> Result[Resolution, SigningConfigError]:
    """Resolve the release signing profile.

    Args:
        path: Location of key.properties.
        base_dir: Directory relative ``storeFile`` values resolve against,
            normally the app module.
        partial_profile: ``"error"`` turns a partially filled file or a
            missing key store into an error; ``"absent"`` treats both as if
            the file did not exist.

    Returns:
        Ok(Resolved) for a complete profile, Ok(Fallback) when no usable
        profile exists, Err for unreadable or malformed files and, under the
        ``"error"`` policy, for incomplete profiles.
    """
    loaded = load_signing_profile(path, base_dir)
    if isinstance(loaded, Err):
        if isinstance(loaded.error, FileNotFound):
            return Ok(Fallback(reason="file-not-found", path=path))
        return Err(loaded.error)

    profile = loaded.value

    missing = profile.missing_fields()
    if missing:
        if partial_profile == "absent":
            return Ok(Fallback(reason="incomplete", path=path, missing=tuple(missing)))
        return Err(MissingField(name=missing[0], path=path))

    store_file = profile.store_file
    if store_file is None or not store_file.is_file():
        if partial_profile == "absent" or store_file is None:
            return Ok(Fallback(reason="store-file-missing", path=path))
        return Err(StoreFileNotFound(store_file=store_file, path=path))

    return Ok(Resolved(profile))
