"""Security checks evaluated against a fetched site."""

from .base import (
    CheckInput,
    DocumentCheck,
    DocumentTree,
    Element,
    HeaderCheck,
    HeaderLookup,
    SecurityCheck,
)
from .csp import evaluate_policy, parse_policy
from .factory import CHECK_NAMES, create_default_checks
from .headers import (
    ContentSecurityPolicyCheck,
    ContentTypeOptionsCheck,
    FrameOptionsCheck,
    StrictTransportSecurityCheck,
    XssProtectionCheck,
)
from .mixed_content import MixedContentCheck, url_scheme
from .models import Classification, Verdict

__all__ = [
    "CHECK_NAMES",
    "CheckInput",
    "Classification",
    "ContentSecurityPolicyCheck",
    "ContentTypeOptionsCheck",
    "DocumentCheck",
    "DocumentTree",
    "Element",
    "FrameOptionsCheck",
    "HeaderCheck",
    "HeaderLookup",
    "MixedContentCheck",
    "SecurityCheck",
    "StrictTransportSecurityCheck",
    "Verdict",
    "XssProtectionCheck",
    "create_default_checks",
    "evaluate_policy",
    "parse_policy",
    "url_scheme",
]
