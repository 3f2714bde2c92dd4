"""Evaluation module for multi-label predictions."""
from sparselinear.evaluation.exceptions import (
    EvaluationError,
    DegenerateDenominatorError,
)
from sparselinear.evaluation.labels import LabelVocabulary
from sparselinear.evaluation.corpus import (
    Document,
    BaseCorpus,
    InMemoryCorpus,
    JsonLinesCorpus,
    load_predictions,
)
from sparselinear.evaluation.confusion import ConfusionMatrix, MultiLabelScores
from sparselinear.evaluation.multilabel_evaluator import MultiLabelEvaluator

__all__ = [
    # Errors
    "EvaluationError",
    "DegenerateDenominatorError",
    # Inputs
    "LabelVocabulary",
    "Document",
    "BaseCorpus",
    "InMemoryCorpus",
    "JsonLinesCorpus",
    "load_predictions",
    # Scoring
    "ConfusionMatrix",
    "MultiLabelScores",
    "MultiLabelEvaluator",
]
