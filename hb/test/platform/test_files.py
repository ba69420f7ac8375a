from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from hb.platform.files import PRIVATE_MODE, atomic_write_text


def test_atomic_write_text_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "out" / "signing.properties"
    atomic_write_text(path, "a=1\n")

    assert path.read_text(encoding="utf-8") == "a=1\n"


def test_atomic_write_text_replaces_existing_content(tmp_path: Path) -> None:
    path = tmp_path / "key.properties"
    path.write_text("old", encoding="utf-8")

    atomic_write_text(path, "new", encoding="latin-1")

    assert path.read_text(encoding="latin-1") == "new"


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_atomic_write_text_applies_mode(tmp_path: Path) -> None:
    path = tmp_path / "key.properties"

    atomic_write_text(path, "keyAlias=app\n", mode=PRIVATE_MODE)

    assert stat.S_IMODE(path.stat().st_mode) == PRIVATE_MODE


def test_atomic_write_text_cleans_temp_file_on_replace_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / "key.properties"

    def fail_replace(_src: Path, _dst: Path) -> None:
        raise OSError("replace failed")

    monkeypatch.setattr(os, "replace", fail_replace)

    with pytest.raises(OSError, match="replace failed"):
        atomic_write_text(path, "payload")

    assert list(tmp_path.glob(".key.properties.*.tmp")) == []
    assert not path.exists()
