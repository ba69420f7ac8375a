"""Tests for hb.signing.resolver module."""

from __future__ import annotations

from pathlib import Path

from hb.core.result import Err, Ok
from hb.signing.errors import MalformedProperties, MissingField, StoreFileNotFound, UnreadableFile
from hb.signing.profile import SigningProfile
from hb.signing.resolver import Fallback, Resolved, load_signing_profile, resolve_signing_profile

COMPLETE = {
    "keyAlias": "app",
    "keyPassword": "pw1",
    "storeFile": "app.keystore",
    "storePassword": "pw2",
}


class TestResolveComplete:
    def test_four_fields_resolve(self, tmp_path: Path, write_properties) -> None:
        path = write_properties(**COMPLETE)

        result = resolve_signing_profile(path, tmp_path)

        assert result == Ok(
            Resolved(
                SigningProfile(
                    key_alias="app",
                    key_password="pw1",
                    store_file=tmp_path / "app.keystore",
                    store_password="pw2",
                )
            )
        )

    def test_store_file_resolved_against_base_dir_not_file_dir(
        self, tmp_path: Path, write_properties
    ) -> None:
        path = write_properties(keystore=False, **{**COMPLETE, "storeFile": "keys/upload.jks"})
        app_dir = tmp_path / "app"
        (app_dir / "keys").mkdir(parents=True)
        (app_dir / "keys" / "upload.jks").write_bytes(b"jks")

        result = resolve_signing_profile(path, app_dir)

        assert isinstance(result, Ok)
        assert isinstance(result.value, Resolved)
        assert result.value.profile.store_file == app_dir / "keys" / "upload.jks"

    def test_store_file_next_to_properties_is_not_found(
        self, tmp_path: Path, write_properties
    ) -> None:
        path = write_properties(**COMPLETE)
        app_dir = tmp_path / "app"

        result = resolve_signing_profile(path, app_dir)

        assert result == Err(StoreFileNotFound(store_file=app_dir / "app.keystore", path=path))


class TestResolveAbsent:
    def test_missing_file_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"

        result = resolve_signing_profile(path, tmp_path)

        assert result == Ok(Fallback(reason="file-not-found", path=path))

    def test_missing_file_falls_back_under_any_policy(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "key.properties"
        for policy in ("error", "absent"):
            result = resolve_signing_profile(path, tmp_path, partial_profile=policy)
            assert isinstance(result, Ok)
            assert isinstance(result.value, Fallback)


class TestPartialProfile:
    def test_missing_field_is_an_error_by_default(self, tmp_path: Path, write_properties) -> None:
        path = write_properties(keyAlias="app", storeFile="app.keystore", storePassword="pw2")

        result = resolve_signing_profile(path, tmp_path)

        assert result == Err(MissingField(name="keyPassword", path=path))

    def test_missing_field_falls_back_when_absent_policy(
        self, tmp_path: Path, write_properties
    ) -> None:
        path = write_properties(keyAlias="app")

        result = resolve_signing_profile(path, tmp_path, partial_profile="absent")

        assert result == Ok(
            Fallback(
                reason="incomplete",
                path=path,
                missing=("keyPassword", "storeFile", "storePassword"),
            )
        )

    def test_empty_file_is_incomplete(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("# nothing yet\n", encoding="latin-1")

        result = resolve_signing_profile(path, tmp_path)

        assert result == Err(MissingField(name="keyAlias", path=path))

    def test_missing_store_is_an_error_by_default(self, tmp_path: Path, write_properties) -> None:
        path = write_properties(keystore=False, **COMPLETE)

        result = resolve_signing_profile(path, tmp_path)

        assert result == Err(StoreFileNotFound(store_file=tmp_path / "app.keystore", path=path))

    def test_missing_store_falls_back_when_absent_policy(
        self, tmp_path: Path, write_properties
    ) -> None:
        path = write_properties(keystore=False, **COMPLETE)

        result = resolve_signing_profile(path, tmp_path, partial_profile="absent")

        assert result == Ok(Fallback(reason="store-file-missing", path=path))


class TestFatalErrors:
    def test_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("keyAlias=app\n=pw\n", encoding="latin-1")

        for policy in ("error", "absent"):
            result = resolve_signing_profile(path, tmp_path, partial_profile=policy)
            assert isinstance(result, Err)
            assert isinstance(result.error, MalformedProperties)

    def test_unreadable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.mkdir()

        result = resolve_signing_profile(path, tmp_path, partial_profile="absent")

        assert isinstance(result, Err)
        assert isinstance(result.error, UnreadableFile)


class TestLoadSigningProfile:
    def test_returns_partial_profile(self, tmp_path: Path, write_properties) -> None:
        path = write_properties(keyAlias="app")

        result = load_signing_profile(path, tmp_path)

        assert result == Ok(SigningProfile(key_alias="app"))


class TestFallbackDescribe:
    def test_messages(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        assert "not found" in Fallback("file-not-found", path).describe()
        assert "keyAlias" in Fallback("incomplete", path, ("keyAlias",)).describe()
        assert "key store" in Fallback("store-file-missing", path).describe()
