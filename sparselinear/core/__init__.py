"""Core types and configuration."""
from sparselinear.core.types import SparseVector, LabeledRow, Problem
from sparselinear.core.config import Config
from sparselinear.core.logging_setup import configure_logging

__all__ = [
    "SparseVector",
    "LabeledRow",
    "Problem",
    "Config",
    "configure_logging",
]
