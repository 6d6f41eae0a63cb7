"""Run the check set against one fetched site."""

from collections.abc import Sequence

from siteguard.modules.checks import CheckInput, SecurityCheck, create_default_checks

from .models import EvaluationResult, FetchedPage, FetchFailure, Unreachable


class Evaluator:
    """Evaluate every check, in declared order, against one site."""

    def __init__(self, checks: Sequence[SecurityCheck] | None = None):
        self.checks = list(checks) if checks is not None else create_default_checks()
        names = [check.name for check in self.checks]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate check name(s): {', '.join(duplicates)}")

    @property
    def check_names(self) -> list[str]:
        """Check names in report column order."""
        return [check.name for check in self.checks]

    def evaluate(self, page: FetchedPage | FetchFailure) -> EvaluationResult | Unreachable:
        """Return verdicts keyed by check name, or Unreachable when the fetch failed."""
        if isinstance(page, FetchFailure):
            return Unreachable(reason=page.reason)

        results: EvaluationResult = {}
        for check in self.checks:
            if check.input_kind is CheckInput.HEADERS:
                results[check.name] = check.evaluate(page.headers)
            elif check.input_kind is CheckInput.DOCUMENT:
                results[check.name] = check.evaluate(page.document)
            else:
                raise ValueError(f"Unsupported check input: {check.input_kind!r}")
        return results
