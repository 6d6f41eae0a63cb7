"""Evaluation of the security check set for one site."""

from .evaluator import Evaluator
from .models import EvaluationResult, FetchedPage, FetchFailure, Unreachable

__all__ = [
    "EvaluationResult",
    "Evaluator",
    "FetchFailure",
    "FetchedPage",
    "Unreachable",
]
