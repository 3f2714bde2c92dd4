"""Sparse vector algebra over {feature_id: weight} mappings."""
import math
from typing import Hashable, Iterable, Mapping, Optional

import numpy as np

_ROUND_OFF = 1e-16


def norm(v: Mapping[Hashable, float]) -> float:
    """Euclidean norm of a sparse vector."""
    return math.sqrt(sum(value * value for value in v.values()))


def dot(a: Mapping[Hashable, float], b: Mapping[Hashable, float]) -> float:
    """
    Dot product of two sparse vectors.
    
    Iterates over the smaller vector and looks keys up in the larger one.
    """
    small, large = (a, b) if len(a) <= len(b) else (b, a)
    total = 0.0
    for key, value in small.items():
        other = large.get(key)
        if other is not None:
            total += value * other
    return total


def cosine_similarity(a: Mapping[Hashable, float], b: Mapping[Hashable, float]) -> float:
    """
    Cosine similarity of two sparse vectors.
    
    Returns:
        dot(a, b) / (norm(a) * norm(b)), or 0.0 when either norm is 0
    """
    denominator = norm(a) * norm(b)
    if denominator == 0:
        return 0.0
    return dot(a, b) / denominator


def _sqrt_or_nan(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def hellinger_distance(a: Mapping[Hashable, float], b: Mapping[Hashable, float]) -> float:
    """
    Negated Hellinger distance between two non-negative sparse vectors.
    
    Sums over the keys of `a` only; keys missing from `b` count as 0.
    The result is <= 0, so larger (closer to 0) means more similar and
    it can be ranked like a similarity. A negative weight on either side
    makes the result NaN.
    """
    total = 0.0
    for key, value in a.items():
        total += (_sqrt_or_nan(value) - _sqrt_or_nan(b.get(key, 0.0))) ** 2
    return -(1.0 / math.sqrt(2)) * math.sqrt(total)


def jaccard_similarity(a: Mapping[Hashable, float], b: Mapping[Hashable, float]) -> float:
    """Jaccard similarity of the key sets of two sparse vectors (values ignored)."""
    intersection = sum(1 for key in a if key in b)
    union = len(a) + len(b) - intersection
    if union == 0:
        return 0.0
    return intersection / union


def summation(v: Mapping[Hashable, float]) -> float:
    """Sum of all stored values."""
    return sum(v.values())


def normalize_to_sum(v: Mapping[Hashable, float], target: float = 1.0) -> Mapping[Hashable, float]:
    """
    Rescale a sparse vector so its values sum to `target`.
    
    Returns a new dict; a vector summing to exactly 0 is returned unchanged.
    """
    total = summation(v)
    if total == 0:
        return v
    ratio = target / total
    return {key: value * ratio for key, value in v.items()}


def normalize_array_to_sum(array, target: float = 1.0) -> np.ndarray:
    """Dense counterpart of normalize_to_sum."""
    values = np.asarray(array, dtype=float)
    total = values.sum()
    if total == 0:
        return values
    return values * (target / total)


def normalize_to_unit_length(array) -> np.ndarray:
    """
    Rescale a dense vector to unit Euclidean length.
    
    An empty or all-zero input yields NaN values; callers guard that case.
    """
    values = np.asarray(array, dtype=float)
    length = np.sqrt(np.sum(values * values))
    with np.errstate(divide="ignore", invalid="ignore"):
        return values / length


def inner_product(a, b) -> float:
    """Inner product of two dense vectors of equal length."""
    left = np.asarray(a, dtype=float)
    right = np.asarray(b, dtype=float)
    if left.shape != right.shape:
        raise ValueError(f"Different length of arrays: {left.shape} {right.shape}")
    return float(np.dot(left, right))


def argmax_key(v: Mapping[Hashable, float]) -> Optional[Hashable]:
    """Key holding the largest value (first one on ties), None when empty."""
    best_key = None
    best_value = -math.inf
    for key, value in v.items():
        if best_key is None or value > best_value:
            best_key = key
            best_value = value
    return best_key


def max_feature_index(vectors: Iterable[Mapping[int, float]]) -> int:
    """Largest feature id over a collection of sparse vectors (-1 when empty)."""
    largest = -1
    for vector in vectors:
        for key in vector:
            if key > largest:
                largest = key
    return largest


def safe_sqrt(x: float) -> float:
    """Square root that treats tiny negative round-off as 0."""
    if -_ROUND_OFF < x < 0:
        x = 0.0
    return math.sqrt(x)
