"""Sparse vector algebra and pruning."""
from sparselinear.vectors.algebra import (
    norm,
    dot,
    cosine_similarity,
    hellinger_distance,
    jaccard_similarity,
    summation,
    normalize_to_sum,
    normalize_array_to_sum,
    normalize_to_unit_length,
    inner_product,
    argmax_key,
    max_feature_index,
    safe_sqrt,
)
from sparselinear.vectors.pruning import (
    DEFAULT_TOP_K,
    top_k_entries,
    prune_top_k,
)

__all__ = [
    "norm",
    "dot",
    "cosine_similarity",
    "hellinger_distance",
    "jaccard_similarity",
    "summation",
    "normalize_to_sum",
    "normalize_array_to_sum",
    "normalize_to_unit_length",
    "inner_product",
    "argmax_key",
    "max_feature_index",
    "safe_sqrt",
    "DEFAULT_TOP_K",
    "top_k_entries",
    "prune_top_k",
]
