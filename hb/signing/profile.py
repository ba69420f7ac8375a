"""Release signing credentials read from ``key.properties``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "SigningProfile",
    "KEY_ALIAS",
    "KEY_PASSWORD",
    "STORE_FILE",
    "STORE_PASSWORD",
    "PROFILE_KEYS",
    "mask",
]

KEY_ALIAS = "keyAlias"
KEY_PASSWORD = "keyPassword"
STORE_FILE = "storeFile"
STORE_PASSWORD = "storePassword"

# Order used when reporting missing fields
PROFILE_KEYS = (KEY_ALIAS, KEY_PASSWORD, STORE_FILE, STORE_PASSWORD)


def mask(secret: str | None) -> str:
    """Render a secret for display."""
    if secret is None:
        return "<unset>"
    return "********"


def _resolve_store_file(value: str, base_dir: Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


@dataclass(frozen=True, slots=True)
class SigningProfile:
    """Credentials for signing a release artifact.

    Every field is optional because the file may be partially filled in;
    ``is_complete`` tells whether the profile can actually sign. Passwords are
    excluded from ``repr`` so profiles can be printed in diagnostics.
    """

    key_alias: str | None = None
    key_password: str | None = field(default=None, repr=False)
    store_file: Path | None = None
    store_password: str | None = field(default=None, repr=False)

    @classmethod
    def from_properties(cls, entries: Mapping[str, str], base_dir: Path) -> SigningProfile:
        """Build a profile from parsed properties.

        Values are taken verbatim; empty values count as absent.
        ``storeFile`` is resolved against ``base_dir`` (the app module
        directory, where Gradle's ``file()`` resolves it) unless it is absolute.
        """

        store = entries.get(STORE_FILE) or None
        return cls(
            key_alias=entries.get(KEY_ALIAS) or None,
            key_password=entries.get(KEY_PASSWORD) or None,
            store_file=_resolve_store_file(store, base_dir) if store else None,
            store_password=entries.get(STORE_PASSWORD) or None,
        )

    def missing_fields(self) -> list[str]:
        """Property names that are absent, in ``PROFILE_KEYS`` order."""
        present = {
            KEY_ALIAS: self.key_alias is not None,
            KEY_PASSWORD: self.key_password is not None,
            STORE_FILE: self.store_file is not None,
            STORE_PASSWORD: self.store_password is not None,
        }
        return [key for key in PROFILE_KEYS if not present[key]]

    @property
    def has_all_fields(self) -> bool:
        return not self.missing_fields()

    @property
    def store_file_exists(self) -> bool:
        return self.store_file is not None and self.store_file.is_file()

    @property
    def is_complete(self) -> bool:
        """All four fields present and the key store exists on disk."""
        return self.has_all_fields and self.store_file_exists
