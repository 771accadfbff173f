import decimal
import logging
import numbers
import numpy as np
from decimal import Decimal
from typing import Iterator, Optional

from . import scalar
from .scalar import Number
from .validation import check_row, check_column, check_same_shape

logger = logging.getLogger(__name__)


class DecimalMatrix:
    """
    Read-only matrix of decimal.Decimal values.

    Concrete subclasses supply the storage (``rows``, ``columns`` and ``_get``).
    The arithmetic defined here is the generic dense algorithm: it visits every
    cell in row-major order and returns a new DenseDecimalMatrix. Storage
    formats with cheaper algorithms override the operations they can speed up.
    """

    @property
    def rows(self) -> int:
        raise NotImplementedError

    @property
    def columns(self) -> int:
        raise NotImplementedError

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def _get(self, row: int, column: int) -> Decimal:
        raise NotImplementedError

    def get(self, row: int, column: int) -> Decimal:
        """Get the value at position (row, column).

        Raises:
            RowOutOfRangeError: If row is outside [0, rows).
            ColumnOutOfRangeError: If column is outside [0, columns).
        """
        check_row(self, row)
        check_column(self, column)
        return self._get(row, column)

    def __getitem__(self, key) -> Decimal:
        if isinstance(key, tuple) and len(key) == 2:
            row, column = key
        else:
            raise KeyError(f"{type(self).__name__} indices must be a tuple of length 2")
        return self.get(row, column)

    def cells(self) -> Iterator[Decimal]:
        """Yields every cell value in row-major order."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield self._get(row, column)

    def to_numpy(self) -> np.ndarray:
        """Returns a dense object-dtype numpy array holding the Decimal values."""
        array = np.empty(self.shape, dtype=object)
        for row in range(self.rows):
            for column in range(self.columns):
                array[row, column] = self._get(row, column)
        return array

    def to_list(self) -> list[list[Decimal]]:
        return [[self._get(row, column) for column in range(self.columns)] for row in range(self.rows)]

    def is_equal(self, other: 'DecimalMatrix') -> bool:
        """Cell-by-cell numeric equality with another matrix of any storage format."""
        if self.shape != other.shape:
            return False
        return all(scalar.is_equal(a, b) for a, b in zip(self.cells(), other.cells()))

    # ************************************
    # generic dense algorithms
    # ************************************

    def _dense_elementwise(self, other: 'DecimalMatrix', op, context: Optional[decimal.Context]) -> 'DecimalMatrix':
        from .dense_matrix import DenseDecimalMatrix

        check_same_shape(self, other)
        logger.debug("dense elementwise %s on %dx%d", op.__name__, self.rows, self.columns)
        values = [op(a, b, context) for a, b in zip(self.cells(), other.cells())]
        return DenseDecimalMatrix(self.rows, self.columns, values)

    def add(self, other: 'DecimalMatrix', context: Optional[decimal.Context] = None) -> 'DecimalMatrix':
        """Elementwise sum of two matrices of identical shape.

        Args:
            other: The matrix to add.
            context: Rounding context applied to each cell, or None for exact arithmetic.

        Raises:
            ShapeMismatchError: If the shapes differ.
        """
        return self._dense_elementwise(other, scalar.add, context)

    def subtract(self, other: 'DecimalMatrix', context: Optional[decimal.Context] = None) -> 'DecimalMatrix':
        """Elementwise difference of two matrices of identical shape."""
        return self._dense_elementwise(other, scalar.subtract, context)

    def multiply(self, value: Number, context: Optional[decimal.Context] = None) -> 'DecimalMatrix':
        """Multiplies every cell by a scalar."""
        from .dense_matrix import DenseDecimalMatrix

        value = scalar.to_decimal(value)
        values = [scalar.multiply(cell, value, context) for cell in self.cells()]
        return DenseDecimalMatrix(self.rows, self.columns, values)

    def sum(self, context: Optional[decimal.Context] = None) -> Decimal:
        """Sum of all cells, accumulated in row-major order."""
        result = Decimal(0)
        for cell in self.cells():
            result = scalar.add(result, cell, context)
        return result

    def product(self, context: Optional[decimal.Context] = None) -> Decimal:
        """Product of all cells, accumulated in row-major order."""
        result = Decimal(1)
        for cell in self.cells():
            result = scalar.multiply(result, cell, context)
        return result

    def __add__(self, other: 'DecimalMatrix') -> 'DecimalMatrix':
        if not isinstance(other, DecimalMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'DecimalMatrix') -> 'DecimalMatrix':
        if not isinstance(other, DecimalMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, value: Number) -> 'DecimalMatrix':
        if isinstance(value, bool) or not isinstance(value, (Decimal, numbers.Real)):
            return NotImplemented
        return self.multiply(value)

    __rmul__ = __mul__
