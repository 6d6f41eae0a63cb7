"""Default check set."""

from .base import SecurityCheck
from .headers import (
    ContentSecurityPolicyCheck,
    ContentTypeOptionsCheck,
    FrameOptionsCheck,
    StrictTransportSecurityCheck,
    XssProtectionCheck,
)
from .mixed_content import MixedContentCheck


def create_default_checks() -> list[SecurityCheck]:
    """Return the standard checks in report column order."""
    return [
        StrictTransportSecurityCheck(),
        FrameOptionsCheck(),
        XssProtectionCheck(),
        ContentTypeOptionsCheck(),
        ContentSecurityPolicyCheck(),
        MixedContentCheck(),
    ]


CHECK_NAMES: tuple[str, ...] = tuple(check.name for check in create_default_checks())
