from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileNotFound:
    """The properties file does not exist. Soft: surfaces only as a fallback."""

    path: Path


@dataclass(frozen=True, slots=True)
class UnreadableFile:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class MalformedProperties:
    path: Path
    line: int
    reason: str


@dataclass(frozen=True, slots=True)
class MissingField:
    name: str
    path: Path


@dataclass(frozen=True, slots=True)
class StoreFileNotFound:
    store_file: Path
    path: Path


@dataclass(frozen=True, slots=True)
class DebugSignedRelease:
    """A release build would be signed with the debug identity."""

    reason: str
    hint: str = "Create key.properties or pass --allow-debug-release"


SigningConfigError = (
    UnreadableFile
    | MalformedProperties
    | MissingField
    | StoreFileNotFound
    | DebugSignedRelease
)
