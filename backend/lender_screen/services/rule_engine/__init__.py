"""Rule engine for screening lenders against a merchant request."""

from .base import EvaluationContext, EvaluationResult, RuleEvaluator
from .classifier import Classifier, LenderOutcome, classify
from .engine import RuleEngine

__all__ = [
    "Classifier",
    "EvaluationContext",
    "EvaluationResult",
    "LenderOutcome",
    "RuleEngine",
    "RuleEvaluator",
    "classify",
]
