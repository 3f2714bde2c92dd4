"""Custom exceptions for evaluation."""


class EvaluationError(Exception):
    """Raised when an evaluation pass cannot produce a score."""
    pass


class DegenerateDenominatorError(EvaluationError):
    """Raised when the pooled micro-F denominator is 0 (no TP, FP or FN anywhere)."""
    pass
