"""Tests for label vocabulary, corpus and prediction sources."""

import json

import pytest

from sparselinear.evaluation import (
    Document,
    InMemoryCorpus,
    JsonLinesCorpus,
    LabelVocabulary,
    load_predictions,
)


class TestLabelVocabulary:
    """Tests for LabelVocabulary."""

    def test_ordered_and_indexable(self):
        labels = LabelVocabulary(["b", "a", "b", "c"])

        assert len(labels) == 3
        assert list(labels) == ["b", "a", "c"]
        assert labels[1] == "a"
        assert labels.index_of("c") == 2
        assert "a" in labels
        assert "z" not in labels

    def test_unknown_label(self):
        with pytest.raises(KeyError):
            LabelVocabulary(["a"]).index_of("z")

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "labels.txt"
        labels = LabelVocabulary(["sports", "politics", "science"])

        labels.save(str(path))
        loaded = LabelVocabulary.load(str(path))

        assert loaded == labels

    def test_load_skips_blank_lines(self, tmp_path):
        path = tmp_path / "labels.txt"
        path.write_text("x\n\n  y  \n")

        assert list(LabelVocabulary.load(str(path))) == ["x", "y"]


class TestDocument:
    """Tests for Document."""

    def test_labels_converted_to_set(self):
        doc = Document("d1", ["a", "b", "a"])

        assert doc.labels == {"a", "b"}


class TestCorpora:
    """Tests for corpus implementations."""

    def test_in_memory(self):
        corpus = InMemoryCorpus([Document("a"), Document("b")])

        assert len(corpus) == 2
        assert [d.id for d in corpus] == ["a", "b"]

    def test_json_lines_reiterable(self, tmp_path):
        """Should start from the first document on every iteration."""
        path = tmp_path / "corpus.jsonl"
        path.write_text(
            json.dumps({"id": 1, "labels": ["x"]}) + "\n\n"
            + json.dumps({"id": "2", "labels": []}) + "\n"
        )
        corpus = JsonLinesCorpus(str(path))

        first = [(d.id, d.labels) for d in corpus]
        second = [(d.id, d.labels) for d in corpus]

        assert first == [("1", {"x"}), ("2", set())]
        assert first == second
        assert len(corpus) == 2

    def test_custom_fields(self, tmp_path):
        path = tmp_path / "corpus.jsonl"
        path.write_text(json.dumps({"pmid": "7", "mesh": ["m1"]}) + "\n")

        docs = list(JsonLinesCorpus(str(path), id_field="pmid", labels_field="mesh"))

        assert docs == [Document("7", {"m1"})]

    def test_missing_corpus_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonLinesCorpus(str(tmp_path / "missing.jsonl"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "corpus.jsonl"
        path.write_text("{not json}\n")

        with pytest.raises(ValueError, match="invalid JSON"):
            list(JsonLinesCorpus(str(path)))

    def test_labels_must_be_list(self, tmp_path):
        """Should reject a string labels field instead of splitting it."""
        path = tmp_path / "corpus.jsonl"
        path.write_text(json.dumps({"id": "a", "labels": "L1"}) + "\n")

        with pytest.raises(ValueError, match="must be a list"):
            list(JsonLinesCorpus(str(path)))

    def test_missing_id(self, tmp_path):
        path = tmp_path / "corpus.jsonl"
        path.write_text(json.dumps({"labels": ["a"]}) + "\n")

        with pytest.raises(ValueError, match="missing 'id'"):
            list(JsonLinesCorpus(str(path)))


class TestLoadPredictions:
    """Tests for load_predictions."""

    def test_load(self, tmp_path):
        path = tmp_path / "predictions.jsonl"
        path.write_text(
            json.dumps({"id": "a", "labels": ["x", "y"]}) + "\n"
            + json.dumps({"id": "b", "labels": None}) + "\n"
        )

        assert load_predictions(str(path)) == {"a": {"x", "y"}, "b": set()}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_predictions(str(tmp_path / "missing.jsonl"))
