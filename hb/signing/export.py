"""Hand the selected signing config to the Gradle toolchain.

The Android Gradle Plugin accepts signing credentials through the
``android.injected.signing.*`` project properties, which take precedence over
the ``signingConfigs`` block of ``build.gradle.kts``. Rendering them here lets
the build script stay free of credential-loading logic.
"""

from __future__ import annotations

import shlex
from enum import Enum

from hb.core.config import DEFAULT_PROPERTIES_FILE

from .profile import KEY_ALIAS, KEY_PASSWORD, STORE_FILE, STORE_PASSWORD
from .selection import SigningConfig

__all__ = [
    "ExportFormat",
    "gradle_properties",
    "env_vars",
    "escape_property",
    "render",
    "render_template",
]

INJECTED_STORE_FILE = "android.injected.signing.store.file"
INJECTED_STORE_PASSWORD = "android.injected.signing.store.password"
INJECTED_KEY_ALIAS = "android.injected.signing.key.alias"
INJECTED_KEY_PASSWORD = "android.injected.signing.key.password"

ENV_PREFIX = "HB_SIGNING_"


class ExportFormat(Enum):
    GRADLE = "gradle"
    PROPERTIES = "properties"
    ENV = "env"

    def __str__(self) -> str:
        return self.value


def gradle_properties(config: SigningConfig) -> dict[str, str]:
    return {
        INJECTED_STORE_FILE: str(config.store_file),
        INJECTED_STORE_PASSWORD: config.store_password,
        INJECTED_KEY_ALIAS: config.key_alias,
        INJECTED_KEY_PASSWORD: config.key_password,
    }


def env_vars(config: SigningConfig) -> dict[str, str]:
    return {
        f"{ENV_PREFIX}VARIANT_SOURCE": config.source,
        f"{ENV_PREFIX}STORE_FILE": str(config.store_file),
        f"{ENV_PREFIX}STORE_PASSWORD": config.store_password,
        f"{ENV_PREFIX}KEY_ALIAS": config.key_alias,
        f"{ENV_PREFIX}KEY_PASSWORD": config.key_password,
    }


def escape_property(text: str, *, is_key: bool = False) -> str:
    """Escape text for a Java properties file.

    Characters outside ISO-8859-1 are written as ``\\uXXXX``.
    """
    out: list[str] = []
    for i, ch in enumerate(text):
        if ch == "\\":
            out.append("\\\\")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\f":
            out.append("\\f")
        elif ch in "=:#!":
            out.append("\\" + ch)
        elif ch == " " and (is_key or i == 0):
            out.append("\\ ")
        elif ord(ch) > 0xFF:
            # Surrogate pairs for characters beyond the BMP
            encoded = ch.encode("utf-16-be")
            for j in range(0, len(encoded), 2):
                out.append(f"\\u{int.from_bytes(encoded[j : j + 2], 'big'):04X}")
        else:
            out.append(ch)
    return "".join(out)


def render(config: SigningConfig, fmt: ExportFormat) -> str:
    """Render the config in the requested format, one entry per line."""
    match fmt:
        case ExportFormat.GRADLE:
            props = gradle_properties(config)
            return "".join(f"{shlex.quote(f'-P{k}={v}')}\n" for k, v in props.items())
        case ExportFormat.PROPERTIES:
            props = gradle_properties(config)
            return "".join(
                f"{escape_property(k, is_key=True)}={escape_property(v)}\n"
                for k, v in props.items()
            )
        case ExportFormat.ENV:
            return "".join(f"export {k}={shlex.quote(v)}\n" for k, v in env_vars(config).items())


def render_template() -> str:
    """A commented key.properties skeleton for the release key."""
    return (
        f"# {DEFAULT_PROPERTIES_FILE}: release signing credentials.\n"
        "# Keep this file out of version control.\n"
        "# A relative storeFile is resolved against the app/ module directory.\n"
        f"{KEY_ALIAS}=\n"
        f"{KEY_PASSWORD}=\n"
        f"{STORE_FILE}=\n"
        f"{STORE_PASSWORD}=\n"
    )
