"""
ParsCore evaluation components.

This package provides the tree evaluator and the result types that record
failures without raising them to the host.
"""

from parscore.execution.evaluator import Evaluator, evaluate_tree
from parscore.execution.result import EvaluationError, EvaluationResult

__all__ = [
    "Evaluator",
    "evaluate_tree",
    "EvaluationError",
    "EvaluationResult",
]
