"""Dimension, bounds and shape checks shared by every matrix type."""

from .matrix_errors import (
    ConstructionError,
    ValueCountError,
    RowOutOfRangeError,
    ColumnOutOfRangeError,
    IndexOutOfRangeError,
    ShapeMismatchError,
)


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_rows(rows: int) -> None:
    if not _is_index(rows) or rows <= 0:
        raise ConstructionError("rows", rows)


def check_columns(columns: int) -> None:
    if not _is_index(columns) or columns <= 0:
        raise ConstructionError("columns", columns)


def check_row(matrix, row: int) -> None:
    if not _is_index(row) or row < 0 or row >= matrix.rows:
        raise RowOutOfRangeError(row, matrix.rows)


def check_column(matrix, column: int) -> None:
    if not _is_index(column) or column < 0 or column >= matrix.columns:
        raise ColumnOutOfRangeError(column, matrix.columns)


def check_index(matrix, index: int) -> None:
    if not _is_index(index) or index < 0 or index >= matrix.rows * matrix.columns:
        raise IndexOutOfRangeError(index, matrix.rows * matrix.columns)


def check_same_shape(matrix, other) -> None:
    if matrix.rows != other.rows or matrix.columns != other.columns:
        raise ShapeMismatchError(matrix.shape, other.shape)


def check_value_count(rows: int, columns: int, values) -> None:
    if len(values) != rows * columns:
        raise ValueCountError(rows, columns, len(values))
