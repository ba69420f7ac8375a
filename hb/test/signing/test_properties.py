"""Tests for hb.signing.properties module."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from hb.core.result import Err, Ok
from hb.signing.errors import FileNotFound, MalformedProperties, UnreadableFile
from hb.signing.properties import PropertiesError, parse_properties, read_properties


def _parse(text: str) -> dict[str, str]:
    result = parse_properties(text)
    assert isinstance(result, Ok), result
    return result.value


class TestParseProperties:
    def test_key_properties_file(self) -> None:
        text = (
            "storePassword=pw2\n"
            "keyPassword=pw1\n"
            "keyAlias=app\n"
            "storeFile=app.keystore\n"
        )
        assert _parse(text) == {
            "storePassword": "pw2",
            "keyPassword": "pw1",
            "keyAlias": "app",
            "storeFile": "app.keystore",
        }

    def test_separators(self) -> None:
        assert _parse("a=1\nb:2\nc 3\nd = 4\ne\t:\t5\n") == {
            "a": "1",
            "b": "2",
            "c": "3",
            "d": "4",
            "e": "5",
        }

    def test_comments_and_blank_lines(self) -> None:
        assert _parse("# comment\n  ! also a comment\n\n   \nkey=value\n") == {"key": "value"}

    def test_leading_whitespace_ignored(self) -> None:
        assert _parse("   keyAlias = app") == {"keyAlias": "app"}

    def test_value_keeps_trailing_whitespace(self) -> None:
        assert _parse("keyPassword=pw \n") == {"keyPassword": "pw "}

    def test_value_may_contain_separators(self) -> None:
        assert _parse("storeFile=C:/keys/app=1.jks") == {"storeFile": "C:/keys/app=1.jks"}

    def test_key_without_value(self) -> None:
        assert _parse("keyAlias\n") == {"keyAlias": ""}

    def test_later_keys_override(self) -> None:
        assert _parse("keyAlias=first\nkeyAlias=second\n") == {"keyAlias": "second"}

    def test_line_continuation(self) -> None:
        text = "storeFile=/very/long/\\\n    path/app.keystore\nkeyAlias=app\n"
        assert _parse(text) == {"storeFile": "/very/long/path/app.keystore", "keyAlias": "app"}

    def test_escaped_backslash_is_not_continuation(self) -> None:
        assert _parse("storeFile=C:\\\\keys\\\\\nkeyAlias=app") == {
            "storeFile": "C:\\keys\\",
            "keyAlias": "app",
        }

    def test_escapes(self) -> None:
        assert _parse("a=tab\\there\nb=\\u00e9t\\u00E9\nc=\\#not comment\n") == {
            "a": "tab\there",
            "b": "été",
            "c": "#not comment",
        }

    def test_escaped_separator_in_key(self) -> None:
        assert _parse("my\\=key=value\nmy\\ key=other") == {"my=key": "value", "my key": "other"}

    def test_crlf_line_endings(self) -> None:
        assert _parse("keyAlias=app\r\nkeyPassword=pw\r\n") == {
            "keyAlias": "app",
            "keyPassword": "pw",
        }

    def test_comment_inside_continuation_is_content(self) -> None:
        assert _parse("a=1\\\n# 2") == {"a": "1# 2"}

    def test_empty_key_is_malformed(self) -> None:
        result = parse_properties("keyAlias=app\n=orphan\n")
        assert result == Err(PropertiesError(line=2, reason="entry has no key"))

    def test_bad_unicode_escape_is_malformed(self) -> None:
        result = parse_properties("# header\nkeyPassword=\\u12G4\n")
        assert isinstance(result, Err)
        assert result.error.line == 2
        assert "\\u" in result.error.reason

    def test_truncated_unicode_escape_is_malformed(self) -> None:
        assert isinstance(parse_properties("k=\\u12"), Err)


class TestReadProperties:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("keyAlias=app\n", encoding="latin-1")

        assert read_properties(path) == Ok({"keyAlias": "app"})

    def test_decodes_latin1(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_bytes(b"keyPassword=caf\xe9\n")

        assert read_properties(path) == Ok({"keyPassword": "café"})

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        assert read_properties(path) == Err(FileNotFound(path))

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.mkdir()

        result = read_properties(path)

        assert isinstance(result, Err)
        assert isinstance(result.error, UnreadableFile)
        assert result.error.path == path

    @pytest.mark.skipif(
        not hasattr(os, "getuid") or os.getuid() == 0,
        reason="root ignores file permissions",
    )
    def test_permission_denied(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("keyAlias=app\n", encoding="latin-1")
        path.chmod(0)
        try:
            result = read_properties(path)
        finally:
            path.chmod(0o600)

        assert result == Err(UnreadableFile(path, "permission denied"))

    def test_malformed_carries_path_and_line(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("keyAlias=app\n: nokey\n", encoding="latin-1")

        result = read_properties(path)

        assert result == Err(MalformedProperties(path, 2, "entry has no key"))


def test_unpaired_surrogate_is_malformed() -> None:
    result = parse_properties("k=\\uD83D\n")
    assert isinstance(result, Err)
    assert "surrogate" in result.error.reason
