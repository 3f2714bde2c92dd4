"""Top-K pruning of named sparse vectors."""
import logging
from typing import Dict, Hashable, Mapping, TypeVar

from sparselinear.vectors.algebra import argmax_key

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 200

K = TypeVar("K", bound=Hashable)


def top_k_entries(vector: Mapping[K, float], k: int = DEFAULT_TOP_K) -> Dict[K, float]:
    """
    Keep the k highest-valued entries of a sparse vector.
    
    Selection is by repeated argmax over a working copy of the remaining
    candidates, so ties go to the entry encountered first. The input is
    not modified.
    
    Args:
        vector: {key: weight} mapping
        k: Maximum number of entries to keep
        
    Returns:
        New dict with min(k, len(vector)) entries, in selection order
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    remaining = dict(vector)
    kept: Dict[K, float] = {}
    for _ in range(min(k, len(remaining))):
        key = argmax_key(remaining)
        kept[key] = remaining.pop(key)
    return kept


def prune_top_k(
    named_vectors: Mapping[str, Mapping[K, float]],
    k: int = DEFAULT_TOP_K,
) -> Dict[str, Dict[K, float]]:
    """
    Apply top_k_entries to every named vector.
    
    Args:
        named_vectors: {name: sparse vector}
        k: Maximum entries kept per vector
        
    Returns:
        New {name: pruned vector} dict ordered by name
    """
    pruned = {
        name: top_k_entries(named_vectors[name], k)
        for name in sorted(named_vectors)
    }
    logger.debug(f"Pruned {len(pruned)} vectors to top {k}")
    return pruned
