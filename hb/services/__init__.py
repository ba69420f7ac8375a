"""Services combining project, config and signing logic."""

from .check import CheckReport, CheckResult, CheckService, CheckStatus
from .signing import SigningDecision, SigningService

__all__ = [
    "CheckReport",
    "CheckResult",
    "CheckService",
    "CheckStatus",
    "SigningDecision",
    "SigningService",
]
