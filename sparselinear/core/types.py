"""Shared types used across modules."""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping


@dataclass
class SparseVector:
    """
    Sparse vector representation.
    
    Attributes:
        indices: Feature ids with stored weights (strictly ascending for parsed rows)
        values: Weight for each feature id
    """
    indices: List[int] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    
    @classmethod
    def from_dict(cls, weights: Mapping[int, float]) -> "SparseVector":
        """Build from a {feature_id: weight} mapping, ordered by feature id."""
        indices = sorted(weights)
        return cls(indices=indices, values=[weights[i] for i in indices])
    
    def to_dict(self) -> Dict[int, float]:
        """Convert to {feature_id: weight} dict."""
        return dict(zip(self.indices, self.values))
    
    def __len__(self) -> int:
        return len(self.indices)
    
    def __iter__(self) -> Iterator:
        return iter(zip(self.indices, self.values))
    
    def __repr__(self) -> str:
        return f"SparseVector(nnz={len(self.indices)})"


@dataclass
class LabeledRow:
    """One training example: a label and its sparse features."""
    label: float
    features: SparseVector


@dataclass
class Problem:
    """
    Design matrix handed to a linear-model solver.
    
    Attributes:
        rows: Training examples in input order
        n: Dimensionality (max feature index, +1 when a bias column is present)
        bias: Bias value; negative means no bias column
    """
    rows: List[LabeledRow]
    n: int
    bias: float = -1.0
    
    @property
    def l(self) -> int:
        """Number of rows."""
        return len(self.rows)
    
    @property
    def x(self) -> List[SparseVector]:
        return [row.features for row in self.rows]
    
    @property
    def y(self) -> List[float]:
        return [row.label for row in self.rows]
    
    def __len__(self) -> int:
        return len(self.rows)
    
    def __iter__(self) -> Iterator[LabeledRow]:
        return iter(self.rows)
    
    def __repr__(self) -> str:
        return f"Problem(l={self.l}, n={self.n}, bias={self.bias})"
