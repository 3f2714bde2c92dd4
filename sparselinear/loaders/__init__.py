"""Problem loaders - LIBSVM-format and dense-matrix ingestion."""
from sparselinear.loaders.exceptions import (
    LoaderError,
    ProblemIOError,
    InvalidInputDataError,
)
from sparselinear.loaders.libsvm_loader import (
    ProblemLoader,
    assemble_problem,
    parse_line,
)

__all__ = [
    "LoaderError",
    "ProblemIOError",
    "InvalidInputDataError",
    "ProblemLoader",
    "assemble_problem",
    "parse_line",
]
