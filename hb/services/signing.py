from __future__ import annotations

from dataclasses import dataclass

from hb.core.config import Config
from hb.core.project import AndroidProject
from hb.core.result import Err, Ok, Result
from hb.signing.errors import SigningConfigError
from hb.signing.resolver import Resolution, resolve_signing_profile
from hb.signing.selection import (
    BuildVariant,
    SigningConfig,
    debug_signing_config,
    enforce_release_signing,
    select_signing_config,
)


@dataclass(frozen=True, slots=True)
class SigningDecision:
    variant: BuildVariant
    config: SigningConfig
    # None for debug builds, which never read the release profile
    resolution: Resolution | None = None


class SigningService:
    """Resolve and select signing credentials for one build invocation."""

    def __init__(self, *, project: AndroidProject, config: Config) -> None:
        self._project = project
        self._config = config

    def resolve(self) -> Result[Resolution, SigningConfigError]:
        settings = self._config.signing
        return resolve_signing_profile(
            self._project.properties_path(self._config),
            self._project.app_dir,
            partial_profile=settings.partial_profile,
        )

    def decide(
        self,
        variant: BuildVariant,
        *,
        allow_debug_signed_release: bool = False,
    ) -> Result[SigningDecision, SigningConfigError]:
        """Select the signing config for ``variant``.

        Debug builds never read the properties file. A debug-signed release
        is refused unless allowed by the argument or by
        ``allow_debug_signed_release`` in hb.toml.
        """
        settings = self._config.signing
        if variant is BuildVariant.DEBUG:
            return Ok(SigningDecision(variant=variant, config=debug_signing_config(settings.debug)))

        resolution = self.resolve()
        if isinstance(resolution, Err):
            return resolution

        selected = select_signing_config(variant, resolution.value, settings.debug)
        enforced = enforce_release_signing(
            variant,
            selected,
            resolution.value,
            allow_debug_signed_release=(
                allow_debug_signed_release or settings.allow_debug_signed_release
            ),
        )
        if isinstance(enforced, Err):
            return enforced
        return Ok(
            SigningDecision(variant=variant, config=enforced.value, resolution=resolution.value)
        )
