"""Response header checks."""

import re

from .base import HeaderCheck, HeaderLookup, read_header
from .csp import evaluate_policy
from .models import Classification, Verdict

ONE_YEAR = 31536000
SIX_MONTHS = 15768000

_MAX_AGE = re.compile(r"(?:^|;\s*)max-age=([0-9]+)", re.IGNORECASE)


class StrictTransportSecurityCheck(HeaderCheck):
    """Require a long-lived Strict-Transport-Security policy."""

    name = "STS"

    def evaluate(self, headers: HeaderLookup) -> Verdict:
        header = (headers.get_header("Strict-Transport-Security") or "").strip()
        if not header:
            return Verdict.fail("No Strict-Transport-Security header set")

        match = _MAX_AGE.search(header)
        if not match:
            return Verdict.fail("Strict-Transport-Security header is invalid")

        max_age = int(match.group(1))
        if max_age >= ONE_YEAR:
            return Verdict.pass_("Strict-Transport-Security set longer than 1 year")
        if max_age >= SIX_MONTHS:
            return Verdict.warn("Strict-Transport-Security set between 6 months and 1 year")
        return Verdict.fail(f"Strict-Transport-Security only set for {max_age} seconds")


class FrameOptionsCheck(HeaderCheck):
    """Require framing to be denied or restricted to the same origin."""

    name = "Frame Options"

    def evaluate(self, headers: HeaderLookup) -> Verdict:
        header = read_header(headers, "Frame-Options") or read_header(headers, "X-Frame-Options")
        if header in ("deny", "sameorigin"):
            return Verdict.pass_(f"X-Frame-Options set to {header}")
        return Verdict.fail("X-Frame-Options is unsafe")


class XssProtectionCheck(HeaderCheck):
    """Require the legacy XSS filter in blocking mode."""

    name = "XSS Protection"

    def evaluate(self, headers: HeaderLookup) -> Verdict:
        if read_header(headers, "X-XSS-Protection") == "1; mode=block":
            return Verdict.pass_("X-XSS-Protection set to blocking mode")
        return Verdict.fail("X-XSS-Protection is unsafe")


class ContentTypeOptionsCheck(HeaderCheck):
    """Require MIME sniffing to be disabled."""

    name = "Content-Type Options"

    def evaluate(self, headers: HeaderLookup) -> Verdict:
        if read_header(headers, "X-Content-Type-Options") == "nosniff":
            return Verdict.pass_("X-Content-Type-Options set to prevent sniffing")
        return Verdict.fail("X-Content-Type-Options is unsafe")


class ContentSecurityPolicyCheck(HeaderCheck):
    """Inspect the first Content-Security-Policy header present.

    Report-only policies never enforce anything, so they can never pass.
    """

    name = "CSP"

    # Priority order: the first non-empty header wins.
    HEADERS = (
        "Content-Security-Policy",
        "Content-Security-Policy-Report-Only",
        "X-Content-Security-Policy",
        "X-WebKit-CSP",
    )
    REPORT_ONLY = "Content-Security-Policy-Report-Only"

    def evaluate(self, headers: HeaderLookup) -> Verdict:
        values = {name: read_header(headers, name) for name in self.HEADERS}
        for header, value in values.items():
            if not value:
                continue
            verdict = evaluate_policy(value, header)
            if header == self.REPORT_ONLY:
                verdict = verdict.demoted(Classification.FAIL)
            return verdict
        return Verdict.fail("No Content Security Policy headers")
