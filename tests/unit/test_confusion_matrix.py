"""Tests for confusion accumulation and F-measures."""

import pytest

from sparselinear.evaluation import (
    ConfusionMatrix,
    DegenerateDenominatorError,
    LabelVocabulary,
    MultiLabelScores,
)


@pytest.fixture
def labels():
    return LabelVocabulary(["L1", "L2", "L3"])


@pytest.fixture
def matrix(labels):
    """Two documents: A (true L1,L2 / predicted L1,L3) and B (true L3 / predicted L3)."""
    cm = ConfusionMatrix(labels)
    cm.accumulate(predicted={"L1", "L3"}, truth={"L1", "L2"})
    cm.accumulate(predicted={"L3"}, truth={"L3"})
    return cm


class TestConfusionMatrix:
    """Tests for ConfusionMatrix."""

    def test_counts(self, matrix):
        """Should classify every label of every document."""
        assert matrix.tp == [1.0, 0.0, 1.0]
        assert matrix.fp == [0.0, 0.0, 1.0]
        assert matrix.fn == [0.0, 1.0, 0.0]
        assert matrix.tn == [1.0, 1.0, 0.0]
        assert matrix.num_documents == 2

    def test_counts_for_label(self, matrix):
        assert matrix.counts_for("L3") == {"tp": 1.0, "fp": 1.0, "tn": 0.0, "fn": 0.0}

    def test_counts_sum_to_documents(self, matrix):
        """Should put each (document, label) pair in exactly one bucket."""
        for i in range(3):
            total = matrix.tp[i] + matrix.fp[i] + matrix.tn[i] + matrix.fn[i]
            assert total == 2

    def test_accessors_return_copies(self, matrix):
        matrix.tp[0] = 99

        assert matrix.tp[0] == 1.0

    def test_f1_per_label(self, matrix):
        assert matrix.f1_per_label() == pytest.approx([1.0, 0.0, 2 / 3])

    def test_macro_f(self, matrix):
        assert matrix.macro_f() == pytest.approx((1.0 + 0.0 + 2 / 3) / 3)
        assert matrix.macro_f() == pytest.approx(0.556, abs=1e-3)

    def test_micro_f(self, matrix):
        assert matrix.micro_f() == pytest.approx(2 / 3)

    def test_untouched_label_scores_one(self, labels):
        """Should define F1 = 1 for a label never predicted and never true."""
        cm = ConfusionMatrix(labels)
        cm.accumulate(predicted={"L1"}, truth={"L1"})

        assert cm.f1_per_label() == [1.0, 1.0, 1.0]
        assert cm.macro_f() == 1.0

    def test_unknown_labels_ignored(self, labels):
        cm = ConfusionMatrix(labels)
        cm.accumulate(predicted={"other"}, truth={"L2"})

        assert cm.pooled() == {"tp": 0.0, "fp": 0.0, "tn": 2.0, "fn": 1.0}

    def test_micro_f_degenerate_raises(self, labels):
        """Should raise when there is nothing to pool."""
        cm = ConfusionMatrix(labels)
        cm.accumulate(predicted=set(), truth=set())

        with pytest.raises(DegenerateDenominatorError):
            cm.micro_f()

    def test_micro_f_degenerate_fallback(self, labels):
        cm = ConfusionMatrix(labels)
        cm.accumulate(predicted=set(), truth=set())

        assert cm.micro_f(zero_division=1.0) == 1.0

    def test_empty_vocabulary_macro(self):
        with pytest.raises(DegenerateDenominatorError):
            ConfusionMatrix(LabelVocabulary()).macro_f()

    def test_finalize(self, matrix):
        scores = matrix.finalize()

        assert isinstance(scores, MultiLabelScores)
        assert (scores.tp, scores.fp, scores.fn, scores.tn) == (2.0, 1.0, 1.0, 2.0)
        assert scores.micro_f == pytest.approx(2 / 3)
        assert scores.per_label_f1["L2"] == 0.0
        assert scores.num_documents == 2


class TestMultiLabelScores:
    """Tests for the scores container."""

    def test_to_dict(self, matrix):
        data = matrix.finalize().to_dict()

        assert data["counts"] == {"tp": 2.0, "fp": 1.0, "fn": 1.0, "tn": 2.0}
        assert data["macro_f"] == pytest.approx(0.5556, abs=1e-4)
        assert set(data["per_label_f1"]) == {"L1", "L2", "L3"}

    def test_summary(self, matrix):
        summary = matrix.finalize().summary()

        assert "Macro-F: 0.5556" in summary
        assert "Micro-F: 0.6667" in summary
        assert "2 / 1 / 1" in summary
