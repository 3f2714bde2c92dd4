"""Tests for the pickle object store."""

import pytest

from sparselinear.evaluation import LabelVocabulary
from sparselinear.loaders import ProblemLoader
from sparselinear.persistence import (
    ObjectStoreError,
    load_label_map,
    read_object,
    write_object,
)


class TestObjectStore:
    """Tests for write_object / read_object."""

    def test_label_map_round_trip(self, tmp_path):
        """Should read back a structurally identical label map."""
        path = tmp_path / "labels.ser"
        label_map = {0: {1, 4}, 1: set(), 7: {2}}

        write_object(label_map, str(path))

        assert read_object(str(path)) == label_map
        assert load_label_map(str(path)) == label_map

    def test_vocabulary_round_trip(self, tmp_path):
        path = tmp_path / "vocab.ser"
        labels = LabelVocabulary(["a", "b"])

        write_object(labels, str(path))

        assert read_object(str(path)) == labels

    def test_problem_round_trip(self, tmp_path):
        path = tmp_path / "problem.ser"
        problem = ProblemLoader.from_lines(["1 1:0.5 2:1.0", "-1 2:3.0"], bias=1.0, max_index=2)

        write_object(problem, str(path))
        loaded = read_object(str(path))

        assert loaded == problem
        assert loaded.n == 3

    def test_read_none(self):
        assert read_object(None) is None

    def test_read_missing(self, tmp_path):
        with pytest.raises(ObjectStoreError):
            read_object(str(tmp_path / "missing.ser"))

    def test_read_corrupt(self, tmp_path):
        path = tmp_path / "corrupt.ser"
        path.write_bytes(b"")

        with pytest.raises(ObjectStoreError):
            read_object(str(path))

    def test_write_unwritable(self, tmp_path):
        with pytest.raises(ObjectStoreError):
            write_object({1: {1}}, str(tmp_path / "missing_dir" / "x.ser"))

    def test_label_map_wrong_shape(self, tmp_path):
        path = tmp_path / "other.ser"
        write_object(["not", "a", "map"], str(path))

        with pytest.raises(ObjectStoreError):
            load_label_map(str(path))
