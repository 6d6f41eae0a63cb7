"""Verdict model shared by every security check."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import IntEnum


class Classification(IntEnum):
    """Check outcome ordered by severity; lower values are worse."""

    FAIL = 1
    WARN = 2
    PASS = 3

    @property
    def label(self) -> str:
        return _LABELS[self]


NO_ISSUES = "No issues found"

_LABELS = {
    Classification.PASS: "pass",
    Classification.WARN: "warning",
    Classification.FAIL: "failure",
}


@dataclass(frozen=True)
class Verdict:
    """Outcome of one check: a classification plus an explanation."""

    classification: Classification
    message: str
    messages: tuple[str, ...] = ()

    @classmethod
    def fail(cls, message: str) -> "Verdict":
        return cls(Classification.FAIL, message, (message,))

    @classmethod
    def warn(cls, message: str) -> "Verdict":
        return cls(Classification.WARN, message, (message,))

    @classmethod
    def pass_(cls, message: str) -> "Verdict":
        return cls(Classification.PASS, message, (message,))

    @classmethod
    def combine(cls, verdicts: Iterable["Verdict"]) -> "Verdict":
        """Reduce verdicts to the most severe one, keeping every message.

        An empty input is a vacuous pass.
        """
        collected = list(verdicts)
        if not collected:
            return cls(Classification.PASS, NO_ISSUES)

        worst = min(verdict.classification for verdict in collected)
        messages = tuple(message for verdict in collected for message in verdict.messages)
        headline = "; ".join(
            message
            for verdict in collected
            if verdict.classification == worst
            for message in verdict.messages
        )
        return cls(worst, headline or NO_ISSUES, messages)

    def demoted(self, classification: Classification) -> "Verdict":
        """Return a copy carrying another classification."""
        return replace(self, classification=classification)

    @property
    def passed(self) -> bool:
        return self.classification == Classification.PASS
