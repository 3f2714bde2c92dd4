"""Label vocabulary shared across an evaluation run."""
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

logger = logging.getLogger(__name__)


class LabelVocabulary:
    """
    Ordered, indexable set of label identifiers.
    
    Usage:
        labels = LabelVocabulary(["sports", "politics"])
        labels.index_of("politics")  # 1
        labels[0]                    # "sports"
    """

    def __init__(self, labels: Iterable[str] = ()):
        self._labels: List[str] = []
        self._positions: Dict[str, int] = {}
        for label in labels:
            self.add(label)

    def add(self, label: str) -> int:
        """Add a label if new and return its position."""
        if label not in self._positions:
            self._positions[label] = len(self._labels)
            self._labels.append(label)
        return self._positions[label]

    def index_of(self, label: str) -> int:
        """Position of a label; raises KeyError if unknown."""
        return self._positions[label]

    def __getitem__(self, position: int) -> str:
        return self._labels[position]

    def __contains__(self, label: object) -> bool:
        return label in self._positions

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelVocabulary):
            return NotImplemented
        return self._labels == other._labels

    def __repr__(self) -> str:
        return f"LabelVocabulary(size={len(self._labels)})"

    def save(self, path: str) -> None:
        """Save labels to a text file, one per line."""
        Path(path).write_text("".join(f"{label}\n" for label in self._labels), encoding="utf-8")
        logger.info(f"Saved {len(self)} labels to {path}")

    @classmethod
    def load(cls, path: str) -> "LabelVocabulary":
        """Load labels from a text file, one per line (blank lines skipped)."""
        text = Path(path).read_text(encoding="utf-8")
        vocabulary = cls(line.strip() for line in text.splitlines() if line.strip())
        logger.info(f"Loaded {len(vocabulary)} labels from {path}")
        return vocabulary
