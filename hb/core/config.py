"""Typed configuration loading and access.

This module provides dataclasses for the optional ``hb.toml`` file that sits
next to ``settings.gradle.kts`` in the Android root project:

    [signing]
    properties_file = "key.properties"
    allow_debug_signed_release = false
    partial_profile = "error"        # or "absent"

    [signing.debug]
    store_file = "~/.android/debug.keystore"
    store_password = "android"
    key_alias = "androiddebugkey"
    key_password = "android"

    [app]
    application_id = "com.hashtara.app"
    min_sdk = 23

The file is read once when the CLI starts; the resulting ``Config`` is
immutable and passed by argument from then on.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from .result import Err, Ok, Result
from .structured import (
    StrDict,
    as_str_dict,
    get_bool,
    get_int,
    get_str,
    get_table,
    get_verbatim_str,
)

__all__ = [
    "Config",
    "ConfigError",
    "SigningSettings",
    "DebugSigningSettings",
    "AppOverrides",
    "PartialProfilePolicy",
    "PARTIAL_PROFILE_POLICIES",
    "DEFAULT_PROPERTIES_FILE",
    "load_config",
    "load_config_or_default",
]

DEFAULT_PROPERTIES_FILE = "key.properties"

# Values the Android SDK uses when it generates the debug key store
DEBUG_STORE_FILE = "~/.android/debug.keystore"
DEBUG_STORE_PASSWORD = "android"
DEBUG_KEY_ALIAS = "androiddebugkey"
DEBUG_KEY_PASSWORD = "android"

type PartialProfilePolicy = Literal["error", "absent"]

PARTIAL_PROFILE_POLICIES: tuple[str, ...] = ("error", "absent")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class DebugSigningSettings:
    """The developer key store used for debug builds and release fallback."""

    store_file: str = DEBUG_STORE_FILE
    store_password: str = DEBUG_STORE_PASSWORD
    key_alias: str = DEBUG_KEY_ALIAS
    key_password: str = DEBUG_KEY_PASSWORD

    def store_path(self) -> Path:
        return Path(self.store_file).expanduser()


@dataclass(frozen=True, slots=True)
class SigningSettings:
    """How release credentials are located and how strictly they are checked."""

    properties_file: str = DEFAULT_PROPERTIES_FILE
    allow_debug_signed_release: bool = False
    partial_profile: PartialProfilePolicy = "error"
    debug: DebugSigningSettings = field(default_factory=DebugSigningSettings)


@dataclass(frozen=True, slots=True)
class AppOverrides:
    """Optional overrides for the static build descriptor.

    None means "keep the built-in value".
    """

    application_id: str | None = None
    namespace: str | None = None
    min_sdk: int | None = None
    ndk_version: str | None = None
    notification_channel_id: str | None = None
    notification_icon: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    signing: SigningSettings = field(default_factory=SigningSettings)
    app: AppOverrides = field(default_factory=AppOverrides)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            TypeError: A key holds a value of the wrong type.
            ValueError: ``partial_profile`` is not a known policy, or a debug
                identity field is empty.
        """
        signing: StrDict = get_table(data, "signing") or {}
        debug: StrDict = get_table(signing, "debug") or {}
        app: StrDict = get_table(data, "app") or {}

        policy = get_str(signing, "partial_profile") or "error"
        if policy not in PARTIAL_PROFILE_POLICIES:
            raise ValueError(
                f"partial_profile must be one of {', '.join(PARTIAL_PROFILE_POLICIES)}"
                f" (got '{policy}')"
            )

        allow = get_bool(signing, "allow_debug_signed_release")

        return cls(
            signing=SigningSettings(
                properties_file=get_str(signing, "properties_file") or DEFAULT_PROPERTIES_FILE,
                allow_debug_signed_release=bool(allow),
                partial_profile=cast(PartialProfilePolicy, policy),
                debug=_debug_settings(debug),
            ),
            app=AppOverrides(
                application_id=get_str(app, "application_id"),
                namespace=get_str(app, "namespace"),
                min_sdk=get_int(app, "min_sdk"),
                ndk_version=get_str(app, "ndk_version"),
                notification_channel_id=get_str(app, "notification_channel_id"),
                notification_icon=get_str(app, "notification_icon"),
            ),
        )


def _debug_settings(debug: StrDict) -> DebugSigningSettings:
    """Build the debug identity from ``[signing.debug]``.

    Passwords are kept as written, so an explicit empty password stays empty.
    An explicit empty ``store_file`` or ``key_alias`` is rejected.

    Raises:
        TypeError: A key holds a value of the wrong type.
        ValueError: ``store_file`` or ``key_alias`` is empty.
    """
    for key in ("store_file", "key_alias"):
        if key in debug and get_str(debug, key) is None:
            raise ValueError(f"signing.debug.{key} must not be empty")

    store_password = get_verbatim_str(debug, "store_password")
    key_password = get_verbatim_str(debug, "key_password")
    return DebugSigningSettings(
        store_file=get_str(debug, "store_file") or DEBUG_STORE_FILE,
        store_password=DEBUG_STORE_PASSWORD if store_password is None else store_password,
        key_alias=get_str(debug, "key_alias") or DEBUG_KEY_ALIAS,
        key_password=DEBUG_KEY_PASSWORD if key_password is None else key_password,
    )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to hb.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config, falling back to defaults only when the file is absent.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
