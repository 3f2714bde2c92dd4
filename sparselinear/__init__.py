"""Sparse LIBSVM-format problem loading, sparse vector algebra and multi-label evaluation."""

__version__ = "0.1.0"
