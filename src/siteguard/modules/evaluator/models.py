"""Inputs and outcomes of a site evaluation."""

from dataclasses import dataclass

from siteguard.modules.checks import DocumentTree, HeaderLookup, Verdict

# check name -> verdict, in report column order
EvaluationResult = dict[str, Verdict]


@dataclass
class FetchedPage:
    """A site fetched successfully: its response headers and parsed document."""

    url: str
    headers: HeaderLookup
    document: DocumentTree
    status_code: int | None = None


@dataclass
class FetchFailure:
    """A site that could not be fetched at the transport level."""

    url: str
    reason: str


@dataclass(frozen=True)
class Unreachable:
    """Outcome for a site that could not be evaluated at all."""

    reason: str = ""
