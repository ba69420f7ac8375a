from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

type WriteProperties = Callable[..., Path]


@pytest.fixture
def write_properties(tmp_path: Path) -> WriteProperties:
    """Write key.properties under tmp_path from keyword entries."""

    def write(*, keystore: bool = True, **entries: str) -> Path:
        path = tmp_path / "key.properties"
        path.write_text(
            "".join(f"{key}={value}\n" for key, value in entries.items()),
            encoding="latin-1",
        )
        store = entries.get("storeFile")
        if keystore and store:
            target = Path(store) if Path(store).is_absolute() else tmp_path / store
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"\xfe\xed\xfe\xed")
        return path

    return write
