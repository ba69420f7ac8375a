"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hb.core.errors import ErrorCode
from hb.output.console import Style
from hb.signing.errors import (
    DebugSignedRelease,
    MalformedProperties,
    MissingField,
    SigningConfigError,
    StoreFileNotFound,
    UnreadableFile,
)

if TYPE_CHECKING:
    from hb.output.console import ConsoleProtocol

__all__ = ["print_signing_error", "signing_error_exit_code"]


def print_signing_error(error: SigningConfigError, console: ConsoleProtocol) -> None:
    """Print a signing error to console with appropriate formatting."""
    match error:
        case UnreadableFile(path=path, reason=reason):
            console.error(f"cannot read {path}: {reason}")
        case MalformedProperties(path=path, line=line, reason=reason):
            console.error(f"{path}:{line}: {reason}")
        case MissingField(name=name, path=path):
            console.error(f"{path}: missing required field '{name}'")
            console.print(
                "hint: fill in every field, or set partial_profile = \"absent\" in hb.toml",
                Style.DIM,
            )
        case StoreFileNotFound(store_file=store_file, path=path):
            console.error(f"key store not found: {store_file} (from {path})")
        case DebugSignedRelease(reason=reason, hint=hint):
            console.error(f"refusing to sign a release build with the debug key ({reason})")
            console.print(f"hint: {hint}", Style.DIM)


def signing_error_exit_code(error: SigningConfigError) -> int:
    """Get exit code for a signing error."""
    match error:
        case UnreadableFile():
            return int(ErrorCode.IO_ERROR)
        case MalformedProperties() | MissingField():
            return int(ErrorCode.CONFIG_ERROR)
        case StoreFileNotFound() | DebugSignedRelease():
            return int(ErrorCode.SIGNING_ERROR)
