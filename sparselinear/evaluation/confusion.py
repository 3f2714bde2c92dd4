"""Per-label confusion counts and the F-measures derived from them."""
from dataclasses import dataclass, field
from typing import Any, Collection, Dict, List, Union

from sparselinear.evaluation.exceptions import DegenerateDenominatorError
from sparselinear.evaluation.labels import LabelVocabulary

# "raise" or the value to report instead of dividing by zero
ZeroDivision = Union[str, float]


@dataclass
class MultiLabelScores:
    """Aggregated scores of one evaluation pass."""
    macro_f: float
    micro_f: float
    tp: float
    fp: float
    fn: float
    tn: float
    per_label_f1: Dict[str, float] = field(default_factory=dict)
    num_documents: int = 0
    num_skipped: int = 0

    def summary(self) -> str:
        """Human-readable summary."""
        counts = f"{self.tp:.0f} / {self.fp:.0f} / {self.fn:.0f}"
        return f"""
╔══════════════════════════════════════════════════════════╗
║  MULTI-LABEL EVALUATION RESULTS                          ║
╠══════════════════════════════════════════════════════════╣
║  Documents: {self.num_documents:<44} ║
║  Skipped:   {self.num_skipped:<44} ║
║  Labels:    {len(self.per_label_f1):<44} ║
╠══════════════════════════════════════════════════════════╣
║  Macro-F: {self.macro_f:<46.4f} ║
║  Micro-F: {self.micro_f:<46.4f} ║
║  TP / FP / FN: {counts:<41} ║
╚══════════════════════════════════════════════════════════╝
"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "macro_f": self.macro_f,
            "micro_f": self.micro_f,
            "counts": {"tp": self.tp, "fp": self.fp, "fn": self.fn, "tn": self.tn},
            "per_label_f1": dict(self.per_label_f1),
            "num_documents": self.num_documents,
            "num_skipped": self.num_skipped,
        }


class ConfusionMatrix:
    """
    Accumulates per-label TP/FP/TN/FN counts over a corpus.
    
    One instance per evaluation pass; not safe to share across passes.
    
    Usage:
        cm = ConfusionMatrix(labels)
        for doc in corpus:
            cm.accumulate(predictions[doc.id], doc.labels)
        scores = cm.finalize()
    """

    def __init__(self, labels: LabelVocabulary):
        self.labels = labels
        size = len(labels)
        self._tp = [0.0] * size
        self._fp = [0.0] * size
        self._tn = [0.0] * size
        self._fn = [0.0] * size
        self.num_documents = 0

    def accumulate(self, predicted: Collection[str], truth: Collection[str]) -> None:
        """Add one document's predicted and true label sets."""
        predicted = set(predicted)
        truth = set(truth)
        for i, label in enumerate(self.labels):
            in_predicted = label in predicted
            in_truth = label in truth
            if in_predicted and in_truth:
                self._tp[i] += 1
            elif in_predicted:
                self._fp[i] += 1
            elif in_truth:
                self._fn[i] += 1
            else:
                self._tn[i] += 1
        self.num_documents += 1

    @property
    def tp(self) -> List[float]:
        return list(self._tp)

    @property
    def fp(self) -> List[float]:
        return list(self._fp)

    @property
    def tn(self) -> List[float]:
        return list(self._tn)

    @property
    def fn(self) -> List[float]:
        return list(self._fn)

    def counts_for(self, label: str) -> Dict[str, float]:
        """TP/FP/TN/FN counts of a single label."""
        i = self.labels.index_of(label)
        return {"tp": self._tp[i], "fp": self._fp[i], "tn": self._tn[i], "fn": self._fn[i]}

    def f1_per_label(self) -> List[float]:
        """F1 of each label; a label never predicted and never true scores 1."""
        scores = []
        for tp, fp, fn in zip(self._tp, self._fp, self._fn):
            denominator = 2.0 * tp + fp + fn
            scores.append(2.0 * tp / denominator if denominator else 1.0)
        return scores

    def macro_f(self) -> float:
        """Unweighted mean of per-label F1."""
        scores = self.f1_per_label()
        if not scores:
            raise DegenerateDenominatorError("Macro-F of an empty label vocabulary")
        return sum(scores) / len(scores)

    def pooled(self) -> Dict[str, float]:
        """TP/FP/TN/FN summed over all labels."""
        return {
            "tp": sum(self._tp),
            "fp": sum(self._fp),
            "tn": sum(self._tn),
            "fn": sum(self._fn),
        }

    def micro_f(self, zero_division: ZeroDivision = "raise") -> float:
        """
        F1 of the pooled counts.
        
        Args:
            zero_division: "raise" to raise DegenerateDenominatorError when
                the pooled denominator is 0, otherwise the value to return
        """
        pooled = self.pooled()
        denominator = 2.0 * pooled["tp"] + pooled["fp"] + pooled["fn"]
        if denominator == 0:
            if zero_division == "raise":
                raise DegenerateDenominatorError(
                    "Micro-F undefined: no true positives, false positives or false negatives"
                )
            return float(zero_division)
        return 2.0 * pooled["tp"] / denominator

    def finalize(self, zero_division: ZeroDivision = "raise") -> MultiLabelScores:
        """Compute macro-F, micro-F and pooled counts."""
        pooled = self.pooled()
        return MultiLabelScores(
            macro_f=self.macro_f(),
            micro_f=self.micro_f(zero_division),
            tp=pooled["tp"],
            fp=pooled["fp"],
            fn=pooled["fn"],
            tn=pooled["tn"],
            per_label_f1=dict(zip(self.labels, self.f1_per_label())),
            num_documents=self.num_documents,
        )
