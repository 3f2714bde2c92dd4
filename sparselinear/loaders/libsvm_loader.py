"""Loader for LIBSVM-style sparse labeled vectors."""

import logging
import math
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from sparselinear.core.config import Config
from sparselinear.core.types import LabeledRow, Problem, SparseVector
from sparselinear.loaders.exceptions import InvalidInputDataError, ProblemIOError

logger = logging.getLogger(__name__)

# Same delimiter set as the LIBSVM tokenizer
_DELIMITERS = re.compile(r"[ \t\n\r\f:]+")
_INTEGER = re.compile(r"[+-]?\d+")

# (label, indices, values) before bias assembly
ParsedRow = Tuple[float, List[int], List[float]]


def _parse_float(token: str) -> float:
    """Parse a finite decimal float; raises ValueError otherwise."""
    if "_" in token:
        raise ValueError(f"invalid float literal: {token}")
    value = float(token)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"NaN or Infinity in input: {token}")
    return value


def _parse_int(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"invalid integer literal: {token}")
    return int(token)


def parse_line(line: str, source: str = "<lines>", line_number: int = 1) -> ParsedRow:
    """
    Parse and validate one `label idx:val idx:val ...` line.
    
    Args:
        line: Raw input line
        source: Source name used in error messages
        line_number: 1-based line number used in error messages
        
    Returns:
        Tuple of (label, indices, values)
        
    Raises:
        InvalidInputDataError: If the line violates the format
    """
    tokens = [t for t in _DELIMITERS.split(line) if t]
    if not tokens:
        raise InvalidInputDataError("empty line", source, line_number)

    try:
        label = _parse_float(tokens[0])
    except ValueError:
        raise InvalidInputDataError(
            f"invalid label: {tokens[0]}", source, line_number, tokens[0]
        )

    indices: List[int] = []
    values: List[float] = []
    index_before = 0
    # A trailing unpaired token is ignored, as LIBSVM readers do
    num_pairs = (len(tokens) - 1) // 2
    for j in range(num_pairs):
        index_token, value_token = tokens[1 + 2 * j], tokens[2 + 2 * j]
        try:
            index = _parse_int(index_token)
        except ValueError:
            raise InvalidInputDataError(
                f"invalid index: {index_token}", source, line_number, index_token
            )

        if index <= 0:
            raise InvalidInputDataError(
                f"invalid index: {index}", source, line_number, index_token
            )
        if index <= index_before:
            raise InvalidInputDataError(
                "indices must be sorted in ascending order",
                source,
                line_number,
                index_token,
            )
        index_before = index

        try:
            value = _parse_float(value_token)
        except ValueError:
            raise InvalidInputDataError(
                f"invalid value: {value_token}", source, line_number, value_token
            )

        indices.append(index)
        values.append(value)

    return label, indices, values


def assemble_problem(
    rows: Sequence[ParsedRow],
    max_index: int,
    bias: float,
) -> Problem:
    """
    Build a Problem from parsed rows, appending the bias feature if enabled.
    
    The bias feature id is `max_index + 1`. Callers must pass a `max_index`
    at least as large as any index in `rows`.
    
    Args:
        rows: Parsed (label, indices, values) rows
        max_index: Largest feature index of the dataset
        bias: Bias value; negative disables the bias column
        
    Returns:
        Problem with n = max_index (+1 with bias) and l = len(rows)
    """
    n = max_index + 1 if bias >= 0 else max_index

    labeled_rows = []
    for label, indices, values in rows:
        indices = list(indices)
        values = list(values)
        if bias >= 0:
            indices.append(max_index + 1)
            values.append(bias)
        labeled_rows.append(
            LabeledRow(label=float(label), features=SparseVector(indices, values))
        )

    return Problem(rows=labeled_rows, n=n, bias=bias)


class ProblemLoader:
    """
    Builds Problems from LIBSVM-style text or dense matrices.
    
    Usage:
        problem = ProblemLoader.from_formatted_text(Path("train.svm"), bias=1.0, max_index=5000)
        
        # In-memory dense features
        problem = ProblemLoader.from_dense_matrix(features, labels, bias=-1)
    """

    @classmethod
    def load(
        cls,
        source: Path,
        config: Optional[Config] = None,
        max_index: Optional[int] = None,
    ) -> Problem:
        """Read a LIBSVM-format file using `parser.bias` and `parser.encoding` from config."""
        section = config.get_section("parser") if config is not None else {}
        return cls.from_formatted_text(
            source,
            bias=float(section.get("bias", -1.0)),
            max_index=max_index,
            encoding=section.get("encoding", "utf-8"),
        )

    @classmethod
    def from_formatted_text(
        cls,
        source: Path,
        bias: float = -1.0,
        max_index: Optional[int] = None,
        encoding: str = "utf-8",
    ) -> Problem:
        """
        Read a problem from a LIBSVM-format file.
        
        Args:
            source: Path to the file
            bias: Bias value; negative disables the bias column
            max_index: Declared maximum feature index (None = largest index seen)
            encoding: File encoding
            
        Returns:
            Problem
            
        Raises:
            ProblemIOError: If the file cannot be read
            InvalidInputDataError: If any line is malformed
        """
        path = Path(source)
        try:
            with open(path, "r", encoding=encoding) as f:
                problem = cls.from_lines(f, bias=bias, max_index=max_index, source_name=str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise ProblemIOError(f"Failed to read {path}: {e}") from e

        logger.info(f"Loaded problem from {path}: l={problem.l}, n={problem.n}")
        return problem

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        bias: float = -1.0,
        max_index: Optional[int] = None,
        source_name: str = "<lines>",
    ) -> Problem:
        """
        Read a problem from an iterable of LIBSVM-format lines.
        
        Any malformed line aborts the whole read.
        """
        rows: List[ParsedRow] = []
        seen_max = 0
        for line_number, line in enumerate(lines, start=1):
            row = parse_line(line, source_name, line_number)
            if row[1]:
                seen_max = max(seen_max, row[1][-1])
            rows.append(row)

        if max_index is None:
            max_index = seen_max
        elif seen_max > max_index:
            logger.debug(
                f"{source_name}: index {seen_max} exceeds declared max_index {max_index}"
            )

        return assemble_problem(rows, max_index, bias)

    @classmethod
    def from_dense_matrix(
        cls,
        matrix,
        labels: Sequence[float],
        bias: float = -1.0,
    ) -> Problem:
        """
        Build a problem from a dense (rows x columns) matrix.
        
        Column j becomes feature id j + 1; every column is kept.
        
        Args:
            matrix: 2-D array-like of feature values
            labels: One label per row
            bias: Bias value; negative disables the bias column
        """
        features = np.asarray(matrix, dtype=float)
        if features.ndim != 2:
            raise ValueError(f"Expected a 2-D matrix, got shape {features.shape}")
        if len(labels) != features.shape[0]:
            raise ValueError(
                f"Got {len(labels)} labels for {features.shape[0]} rows"
            )

        num_columns = features.shape[1]
        indices = list(range(1, num_columns + 1))
        rows = [
            (float(label), indices, row.tolist())
            for label, row in zip(labels, features)
        ]
        return assemble_problem(rows, num_columns, bias)
