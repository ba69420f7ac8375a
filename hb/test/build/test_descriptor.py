"""Tests for hb.build.descriptor module."""

from __future__ import annotations

import pytest

from hb.build.descriptor import (
    DEPENDENCIES,
    BuildDescriptor,
    Dependency,
    parse_coordinate,
    validate_dependencies,
)
from hb.core.config import AppOverrides


class TestParseCoordinate:
    def test_with_version(self) -> None:
        dep = parse_coordinate("androidx.multidex:multidex:2.0.1")
        assert dep == Dependency("implementation", "androidx.multidex", "multidex", "2.0.1")

    def test_without_version(self) -> None:
        dep = parse_coordinate("com.google.firebase:firebase-auth-ktx")
        assert dep.version is None
        assert dep.coordinate == "com.google.firebase:firebase-auth-ktx"

    @pytest.mark.parametrize(
        "text",
        ["multidex", "a:b:c:d", "com.google:bad artifact:1.0", "group::1.0"],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_coordinate(text)


class TestNotation:
    def test_implementation(self) -> None:
        dep = parse_coordinate("com.google.android.gms:play-services-auth:20.6.0")
        assert dep.notation == 'implementation("com.google.android.gms:play-services-auth:20.6.0")'

    def test_platform(self) -> None:
        dep = parse_coordinate("com.google.firebase:firebase-bom:32.3.1", platform=True)
        assert dep.notation == 'implementation(platform("com.google.firebase:firebase-bom:32.3.1"))'

    def test_desugaring(self) -> None:
        dep = parse_coordinate(
            "com.android.tools:desugar_jdk_libs:2.1.5", configuration="coreLibraryDesugaring"
        )
        assert dep.notation == 'coreLibraryDesugaring("com.android.tools:desugar_jdk_libs:2.1.5")'


class TestDeclaredDependencies:
    def test_pinned_versions(self) -> None:
        versions = {d.artifact: d.version for d in DEPENDENCIES}
        assert versions == {
            "firebase-bom": "32.3.1",
            "firebase-analytics-ktx": None,
            "firebase-auth-ktx": None,
            "play-services-auth": "20.6.0",
            "multidex": "2.0.1",
            "desugar_jdk_libs": "2.1.5",
            "firebase-messaging": "23.3.1",
        }

    def test_only_messaging_overrides_the_bom(self) -> None:
        issues = validate_dependencies()
        assert [(i.dependency.artifact, i.is_error) for i in issues] == [
            ("firebase-messaging", False)
        ]


class TestValidateDependencies:
    def test_unmanaged_without_version(self) -> None:
        deps = (parse_coordinate("com.squareup.okhttp3:okhttp"),)
        issues = validate_dependencies(deps)
        assert len(issues) == 1
        assert issues[0].is_error
        assert "no BoM" in issues[0].message

    def test_platform_without_version(self) -> None:
        deps = (parse_coordinate("com.google.firebase:firebase-bom", platform=True),)
        assert validate_dependencies(deps)[0].is_error

    def test_duplicates(self) -> None:
        dep = parse_coordinate("androidx.multidex:multidex:2.0.1")
        issues = validate_dependencies((dep, dep))
        assert [i.message for i in issues] == ["declared more than once"]


class TestBuildDescriptor:
    def test_defaults_match_gradle_script(self) -> None:
        d = BuildDescriptor()
        assert d.namespace == "com.hashtara.app"
        assert d.application_id == "com.hashtara.app"
        assert d.min_sdk == 23
        assert d.ndk_version == "27.0.12077973"
        assert d.java_version == "11"
        assert d.multidex and d.core_library_desugaring
        assert not d.minify_release and not d.shrink_resources_release

    def test_manifest_placeholders(self) -> None:
        assert BuildDescriptor().manifest_placeholders() == {
            "com.google.firebase.messaging.default_notification_channel_id": "hashtara_notifications",
            "com.google.firebase.messaging.default_notification_icon": "@mipmap/ic_launcher",
        }

    def test_overrides(self) -> None:
        d = BuildDescriptor.from_overrides(
            AppOverrides(min_sdk=26, notification_channel_id="alerts")
        )
        assert d.min_sdk == 26
        assert d.application_id == "com.hashtara.app"
        assert d.manifest_placeholders()[
            "com.google.firebase.messaging.default_notification_channel_id"
        ] == "alerts"

    def test_no_overrides(self) -> None:
        assert BuildDescriptor.from_overrides(AppOverrides()) == BuildDescriptor()
