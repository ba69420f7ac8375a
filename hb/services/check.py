"""Signing and build configuration checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from hb.build.descriptor import BuildDescriptor, validate_dependencies
from hb.core.config import Config
from hb.core.project import AndroidProject
from hb.core.result import Err
from hb.signing.errors import (
    FileNotFound,
    MalformedProperties,
    UnreadableFile,
)
from hb.signing.resolver import load_signing_profile


class CheckStatus(Enum):
    """Status of a check result."""

    OK = auto()
    """Check passed."""

    WARNING = auto()
    """Usable, but a release build may not be signed as expected."""

    ERROR = auto()
    """The configuration is broken."""


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a single check.

    Attributes:
        name: What was checked (e.g. "key.properties", "debug key store")
        status: Whether the check passed, warned, or failed
        message: Human-readable result message
        hint: Optional fix
    """

    name: str
    status: CheckStatus
    message: str
    hint: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == CheckStatus.ERROR

    @classmethod
    def success(cls, name: str, message: str) -> CheckResult:
        return cls(name=name, status=CheckStatus.OK, message=message)

    @classmethod
    def warning(cls, name: str, message: str, hint: str | None = None) -> CheckResult:
        return cls(name=name, status=CheckStatus.WARNING, message=message, hint=hint)

    @classmethod
    def error(cls, name: str, message: str, hint: str | None = None) -> CheckResult:
        return cls(name=name, status=CheckStatus.ERROR, message=message, hint=hint)


@dataclass(frozen=True, slots=True)
class CheckReport:
    signing: list[CheckResult]
    dependencies: list[CheckResult]

    def all_results(self) -> list[CheckResult]:
        return [*self.signing, *self.dependencies]

    def has_errors(self) -> bool:
        return any(r.is_error for r in self.all_results())


class CheckService:
    def __init__(self, *, project: AndroidProject, config: Config) -> None:
        self._project = project
        self._config = config

    def run(self) -> CheckReport:
        return CheckReport(
            signing=[*self._check_release_profile(), self._check_debug_store()],
            dependencies=self._check_dependencies(),
        )

    def _check_release_profile(self) -> list[CheckResult]:
        settings = self._config.signing
        path = self._project.properties_path(self._config)
        name = settings.properties_file

        loaded = load_signing_profile(path, self._project.app_dir)
        if isinstance(loaded, Err):
            match loaded.error:
                case FileNotFound():
                    return [self._no_release_key(name, f"not found at {path}")]
                case UnreadableFile(reason=reason):
                    return [CheckResult.error(name, f"cannot read: {reason}")]
                case MalformedProperties(line=line, reason=reason):
                    return [CheckResult.error(name, f"line {line}: {reason}")]

        profile = loaded.value
        missing = profile.missing_fields()
        if missing:
            message = f"missing {', '.join(missing)}"
            if settings.partial_profile == "absent":
                return [self._no_release_key(name, message)]
            return [CheckResult.error(name, message, hint="fill in every field")]

        results = [CheckResult.success(name, f"key alias '{profile.key_alias}'")]
        if not profile.store_file_exists:
            message = f"{profile.store_file} does not exist"
            if settings.partial_profile == "absent":
                results.append(self._no_release_key("release key store", message))
            else:
                results.append(CheckResult.error("release key store", message))
        else:
            results.append(CheckResult.success("release key store", str(profile.store_file)))
        return results

    def _no_release_key(self, name: str, message: str) -> CheckResult:
        if self._config.signing.allow_debug_signed_release:
            return CheckResult.warning(
                name,
                f"{message}; release builds will be signed with the debug key",
            )
        return CheckResult.warning(
            name,
            f"{message}; release builds will be refused",
            hint="Run: hb template",
        )

    def _check_debug_store(self) -> CheckResult:
        store = self._config.signing.debug.store_path()
        if store.is_file():
            return CheckResult.success("debug key store", str(store))
        return CheckResult.warning(
            "debug key store",
            f"{store} does not exist",
            hint="The Android SDK creates it on the first debug build",
        )

    def _check_dependencies(self) -> list[CheckResult]:
        descriptor = BuildDescriptor.from_overrides(self._config.app)
        issues = validate_dependencies(descriptor.dependencies)
        flagged = {issue.dependency for issue in issues}
        results = [
            CheckResult.error(i.dependency.coordinate, i.message)
            if i.is_error
            else CheckResult.warning(i.dependency.coordinate, i.message)
            for i in issues
        ]
        results.extend(
            CheckResult.success(d.coordinate, d.configuration)
            for d in descriptor.dependencies
            if d not in flagged
        )
        return results
