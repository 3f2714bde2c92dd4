"""Corpus sources yielding documents with their gold labels."""
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Set

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """
    A test document with its true labels.
    
    Attributes:
        id: Document identifier
        labels: Set of gold label identifiers
    """
    id: str
    labels: Set[str] = field(default_factory=set)

    def __post_init__(self):
        if not isinstance(self.labels, set):
            self.labels = set(self.labels)


class BaseCorpus(ABC):
    """
    Abstract corpus. Every iteration starts again from the first document.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Document]:
        pass

    def __len__(self) -> int:
        return sum(1 for _ in self)


class InMemoryCorpus(BaseCorpus):
    """Corpus backed by a list of documents."""

    def __init__(self, documents: Iterable[Document]):
        self.documents: List[Document] = list(documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)


def _read_records(path: Path, id_field: str, labels_field: str) -> Iterator[Dict]:
    """Yield {id, labels} records from a JSON-lines file."""
    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}:{line_number}: invalid JSON: {e}") from e
            if id_field not in record:
                raise ValueError(f"{path}:{line_number}: missing '{id_field}' field")
            labels = record.get(labels_field) or []
            if not isinstance(labels, list):
                raise ValueError(
                    f"{path}:{line_number}: '{labels_field}' must be a list, got {type(labels).__name__}"
                )
            yield {"id": str(record[id_field]), "labels": labels}


class JsonLinesCorpus(BaseCorpus):
    """
    Corpus stored as JSON lines, one document per line.
    
    Usage:
        corpus = JsonLinesCorpus("test.jsonl")
        for doc in corpus:
            print(doc.id, doc.labels)
    """

    def __init__(self, path: str, id_field: str = "id", labels_field: str = "labels"):
        self.path = Path(path)
        self.id_field = id_field
        self.labels_field = labels_field
        if not self.path.exists():
            raise FileNotFoundError(f"Corpus file not found: {self.path}")

    def __iter__(self) -> Iterator[Document]:
        for record in _read_records(self.path, self.id_field, self.labels_field):
            yield Document(id=record["id"], labels=set(record["labels"]))


def load_predictions(
    path: str,
    id_field: str = "id",
    labels_field: str = "labels",
) -> Dict[str, Set[str]]:
    """
    Load predicted label sets from a JSON-lines file.
    
    Returns:
        Dict mapping document id -> set of predicted labels
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Predictions file not found: {path}")

    predictions: Dict[str, Set[str]] = {}
    for record in _read_records(path, id_field, labels_field):
        predictions[record["id"]] = set(record["labels"])

    logger.info(f"Loaded predictions for {len(predictions)} documents from {path}")
    return predictions
