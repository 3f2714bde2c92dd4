"""Label-pivoted micro/macro F-measure evaluation over a corpus."""
import logging
from typing import Mapping, Optional, Set

from sparselinear.evaluation.confusion import ConfusionMatrix, MultiLabelScores, ZeroDivision
from sparselinear.evaluation.corpus import BaseCorpus
from sparselinear.evaluation.labels import LabelVocabulary

logger = logging.getLogger(__name__)


class MultiLabelEvaluator:
    """
    Evaluate predicted label sets against a corpus' gold labels.
    
    Usage:
        evaluator = MultiLabelEvaluator(labels, corpus, predictions)
        scores = evaluator.evaluate()
        print(scores.summary())
    """

    def __init__(
        self,
        labels: LabelVocabulary,
        corpus: BaseCorpus,
        predictions: Mapping[str, Set[str]],
        logger: Optional[logging.Logger] = None,
        zero_division: ZeroDivision = "raise",
    ):
        """
        Args:
            labels: Label vocabulary
            corpus: Documents with their true labels
            predictions: Document id -> predicted label set
            logger: Where diagnostics and the report go (default: module logger)
            zero_division: Micro-F policy for an all-zero pooled denominator
        """
        self.labels = labels
        self.corpus = corpus
        self.predictions = predictions
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.zero_division = zero_division

    def evaluate(self) -> MultiLabelScores:
        """
        Run one pass over the corpus.
        
        Documents without predictions are reported and skipped.
        
        Returns:
            MultiLabelScores with macro-F, micro-F and pooled counts
            
        Raises:
            DegenerateDenominatorError: If micro-F is undefined and
                zero_division is "raise" (logged after MacroF and the counts)
        """
        matrix = ConfusionMatrix(self.labels)
        skipped = 0

        for doc in self.corpus:
            predicted = self.predictions.get(doc.id)
            if predicted is None:
                self.logger.warning(f"Null predictions for {doc.id}")
                skipped += 1
                continue
            matrix.accumulate(predicted, doc.labels)

        # Macro-F and pooled counts are reported even when micro-F is undefined
        pooled = matrix.pooled()
        self.logger.info(f"MacroF: {matrix.macro_f()}")
        self.logger.info(f"{pooled['tp']}, {pooled['fp']}, {pooled['fn']}")

        scores = matrix.finalize(self.zero_division)
        scores.num_skipped = skipped
        self.logger.info(f"MicroF: {scores.micro_f}")
        return scores
