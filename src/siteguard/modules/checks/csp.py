"""Content-Security-Policy parsing."""

from .models import Verdict


def parse_policy(value: str) -> dict[str, list[str]]:
    """Split a policy into an ordered directive -> sources mapping.

    Only the first occurrence of a directive counts, as browsers do.
    """
    directives: dict[str, list[str]] = {}
    for token in value.split(";"):
        parts = token.strip().split()
        if not parts:
            continue
        name = parts[0].lower()
        directives.setdefault(name, parts[1:])
    return directives


def evaluate_policy(value: str, header: str) -> Verdict:
    """Evaluate one policy value.

    Directive semantics are not analysed, so a present policy is reported as a
    failure that names what was found.
    """
    directives = parse_policy(value)
    names = ", ".join(directives) or "none"
    return Verdict.fail(
        f"{header} set with {len(directives)} directive(s) ({names}); directives not verified"
    )
