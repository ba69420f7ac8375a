from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from hb.core.project import PROJECT_ENV_VAR


@pytest.fixture
def android_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An Android root project with a debug key store under a fake HOME."""
    root = tmp_path / "android"
    (root / "app").mkdir(parents=True)
    (root / "settings.gradle.kts").write_text('include(":app")\n', encoding="utf-8")

    home = tmp_path / "home"
    (home / ".android").mkdir(parents=True)
    (home / ".android" / "debug.keystore").write_bytes(b"\xfe\xed\xfe\xed")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(PROJECT_ENV_VAR, raising=False)
    return root


@pytest.fixture
def write_release_key(android_root: Path) -> Callable[..., Path]:
    """Write android_root/key.properties; ``omit`` drops fields.

    The key store is created under android_root/app, where a relative
    ``storeFile`` resolves.
    """

    def write(*, keystore: bool = True, omit: tuple[str, ...] = (), **overrides: str) -> Path:
        entries = {
            "keyAlias": "app",
            "keyPassword": "pw1",
            "storeFile": "app.keystore",
            "storePassword": "pw2",
            **overrides,
        }
        path = android_root / "key.properties"
        path.write_text(
            "".join(f"{k}={v}\n" for k, v in entries.items() if k not in omit),
            encoding="latin-1",
        )
        if keystore:
            (android_root / "app" / entries["storeFile"]).write_bytes(b"\xfe\xed\xfe\xed")
        return path

    return write
