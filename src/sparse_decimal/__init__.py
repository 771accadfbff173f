"""
Sparse matrices of arbitrary-precision decimal values.

Stores only the cells that differ from a shared default value, with elementwise
arithmetic and reductions whose cost scales with the number of stored cells.
"""

__version__ = "0.1.0"

import logging

from .sparse_matrix import SparseDecimalMatrix, SparseMatrixBuilder
from .dense_matrix import DenseDecimalMatrix
from .base_matrix import DecimalMatrix
from .sparse_store import SparseStore
from .config import ArithmeticConfig
from .matrix_errors import (
    DecimalMatrixError,
    ConstructionError,
    ValueCountError,
    BoundsError,
    RowOutOfRangeError,
    ColumnOutOfRangeError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    BuilderConsumedError,
    MatrixConfigError,
    InvalidPrecisionError,
    InvalidRoundingModeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SparseDecimalMatrix",
    "SparseMatrixBuilder",
    "DenseDecimalMatrix",
    "DecimalMatrix",
    "SparseStore",
    "ArithmeticConfig",
    "DecimalMatrixError",
    "ConstructionError",
    "ValueCountError",
    "BoundsError",
    "RowOutOfRangeError",
    "ColumnOutOfRangeError",
    "IndexOutOfRangeError",
    "ShapeMismatchError",
    "BuilderConsumedError",
    "MatrixConfigError",
    "InvalidPrecisionError",
    "InvalidRoundingModeError",
]
