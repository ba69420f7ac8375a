"""Android project detection and paths.

The project root is the Gradle root project of the Flutter app, i.e. the
``android/`` directory that holds ``settings.gradle`` or
``settings.gradle.kts``. ``key.properties`` and ``hb.toml`` live there, and
relative key-store paths are resolved against it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import Config
from .result import Err, Ok, Result

__all__ = [
    "AndroidProject",
    "ProjectError",
    "PROJECT_ENV_VAR",
    "detect_project",
    "find_project_upward",
    "is_project_root",
    "project_root_at",
]

PROJECT_ENV_VAR = "HB_PROJECT_ROOT"

_SETTINGS_FILES = ("settings.gradle.kts", "settings.gradle")


@dataclass(frozen=True)
class ProjectError:
    """Error when the Android project cannot be located."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class AndroidProject:
    """A detected Android root project."""

    root: Path

    @property
    def config_path(self) -> Path:
        """Path to hb.toml."""
        return self.root / "hb.toml"

    @property
    def app_dir(self) -> Path:
        """Path to the application module; relative ``storeFile`` values resolve here."""
        return self.root / "app"

    def properties_path(self, config: Config) -> Path:
        """Path to the signing properties file named by the config.

        Relative names resolve against the root; ``~`` is expanded.
        """
        return self.root / Path(config.signing.properties_file).expanduser()

    def __str__(self) -> str:
        return str(self.root)


def is_project_root(path: Path) -> bool:
    """Check if a path is a Gradle root project."""
    return any((path / name).is_file() for name in _SETTINGS_FILES)


def project_root_at(path: Path) -> Path | None:
    """Return the Gradle root for path itself, or its android/ dir for a Flutter root."""
    if is_project_root(path):
        return path
    # Flutter layout: <flutter-root>/pubspec.yaml + <flutter-root>/android/
    android = path / "android"
    if (path / "pubspec.yaml").is_file() and is_project_root(android):
        return android
    return None


def find_project_upward(start: Path) -> Path | None:
    """Search upward from start for an Android root project.

    Returns the project root if found, None otherwise.
    """
    for parent in (start, *start.parents):
        found = project_root_at(parent)
        if found is not None:
            return found
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = PROJECT_ENV_VAR,
) -> Result[AndroidProject, ProjectError]:
    """Detect the Android root project.

    Detection order:
    1. ``env_var`` environment variable (if set, it must be valid)
    2. Search upward from start_dir (or cwd)
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        found = project_root_at(env_path) if env_path.is_dir() else None
        if found is not None:
            return Ok(AndroidProject(root=found))
        return Err(
            ProjectError(
                message=f"${env_var} is set to '{env_value}' but it is not an Android project",
                searched_from=env_path if env_path.is_dir() else None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    if found is not None:
        return Ok(AndroidProject(root=found))

    return Err(
        ProjectError(
            message="Could not find an Android project (no settings.gradle[.kts])",
            searched_from=search_start,
        )
    )
