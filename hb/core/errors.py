"""Error codes for CLI exit status.

Every command maps its failure to one of these codes so shell scripts and CI
jobs wrapping the Gradle build can tell configuration problems apart from
signing refusals.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad option value, unknown variant)
    - 2: Configuration error (bad hb.toml, malformed key.properties)
    - 3: Signing error (release would be debug-signed, key store missing)
    - 5: I/O error (unreadable file, write failed)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    SIGNING_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
