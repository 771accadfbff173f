import numpy as np
from decimal import Decimal
from typing import Callable, Optional, Sequence, Union

from .base_matrix import DecimalMatrix
from .constants import DEFAULT_VALUE
from .scalar import Number, to_decimal
from .validation import check_rows, check_columns, check_value_count


class DenseDecimalMatrix(DecimalMatrix):
    """
    Matrix storing every cell explicitly in a read-only numpy object array.

    This is the storage used by the generic dense algorithms, and the result
    type of any operation that cannot keep a sparse representation.
    """

    def __init__(self, rows: int, columns: int,
                 values: Optional[Union[Sequence[Number], Callable[[int, int], Number]]] = None):
        """
        Initialize DenseDecimalMatrix instance.

        Args:
            rows: Number of rows, strictly positive.
            columns: Number of columns, strictly positive.
            values: None for a matrix of zeros, a flat sequence of rows*columns values
                in row-major order, or a function called once per cell with (row, column).
        """
        check_rows(rows)
        check_columns(columns)
        self._rows = rows
        self._columns = columns

        data = np.empty((rows, columns), dtype=object)
        if values is None:
            data.fill(DEFAULT_VALUE)
        elif callable(values):
            for row in range(rows):
                for column in range(columns):
                    data[row, column] = to_decimal(values(row, column))
        else:
            check_value_count(rows, columns, values)
            for index, value in enumerate(values):
                data[index // columns, index % columns] = to_decimal(value)
        data.flags.writeable = False
        self._data = data

    @classmethod
    def from_array(cls, array) -> 'DenseDecimalMatrix':
        """Builds a matrix from a 2-D array-like of numbers."""
        array = np.asarray(array, dtype=object)
        if array.ndim != 2:
            raise ValueError(f"DenseDecimalMatrix requires a 2D array, got {array.ndim}D")
        rows, columns = array.shape
        return cls(rows, columns, list(array.ravel()))

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def _get(self, row: int, column: int) -> Decimal:
        return self._data[row, column]

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __repr__(self) -> str:
        return f"DenseDecimalMatrix({self.rows}x{self.columns}, {self.to_list()})"
