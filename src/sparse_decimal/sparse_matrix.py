import decimal
import logging
import pandas as pd
from decimal import Decimal
from typing import Callable, Iterator, Optional, Sequence, Union

from . import scalar
from .base_matrix import DecimalMatrix
from .constants import DEFAULT_VALUE
from .matrix_errors import BuilderConsumedError
from .scalar import Number, to_decimal
from .sparse_store import SparseStore
from .validation import check_rows, check_columns, check_row, check_column, check_index, check_same_shape, check_value_count

logger = logging.getLogger(__name__)

Values = Optional[Union[Sequence[Number], Callable[[int, int], Number]]]


class SparseMatrixBuilder:
    """
    Mutable, exclusively owned form of a sparse matrix.

    Values are written through ``set``; ``build`` hands the store over to a
    new SparseDecimalMatrix and leaves the builder unusable.
    """

    def __init__(self, rows: int, columns: int, default_value: Number = DEFAULT_VALUE):
        check_rows(rows)
        check_columns(columns)
        self.rows = rows
        self.columns = columns
        self._store: Optional[SparseStore] = SparseStore(default_value=to_decimal(default_value))

    @classmethod
    def from_values(cls, rows: int, columns: int, values: Sequence[Number],
                    default_value: Number = DEFAULT_VALUE) -> 'SparseMatrixBuilder':
        """Builder filled from a flat sequence of rows*columns values in row-major order."""
        builder = cls(rows, columns, default_value)
        check_value_count(rows, columns, values)
        for index, value in enumerate(values):
            builder.set_index(index, value)
        return builder

    @classmethod
    def from_function(cls, rows: int, columns: int, function: Callable[[int, int], Number],
                      default_value: Number = DEFAULT_VALUE) -> 'SparseMatrixBuilder':
        """Builder filled by calling function(row, column) once for every cell, in row-major order."""
        builder = cls(rows, columns, default_value)
        for row in range(rows):
            for column in range(columns):
                builder.set(row, column, function(row, column))
        return builder

    def _live_store(self, operation: str) -> SparseStore:
        if self._store is None:
            raise BuilderConsumedError(operation)
        return self._store

    @property
    def default_value(self) -> Decimal:
        return self._live_store("read default value").default_value

    def get(self, row: int, column: int) -> Decimal:
        check_row(self, row)
        check_column(self, column)
        return self._live_store("get")[row * self.columns + column]

    def set(self, row: int, column: int, value: Number) -> None:
        """Set the value at position (row, column).

        Raises:
            RowOutOfRangeError: If row is outside [0, rows).
            ColumnOutOfRangeError: If column is outside [0, columns).
            BuilderConsumedError: If build() was already called.
        """
        check_row(self, row)
        check_column(self, column)
        self.set_index(row * self.columns + column, value)

    def set_index(self, index: int, value: Number) -> None:
        """Set the value at a linear (row-major) index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, rows * columns).
        """
        check_index(self, index)
        self._live_store("set")[index] = to_decimal(value)

    def filled_count(self) -> int:
        return len(self._live_store("count"))

    def _release(self) -> SparseStore:
        store = self._live_store("build")
        self._store = None
        return store

    def build(self) -> 'SparseDecimalMatrix':
        """Freeze the builder contents into an immutable SparseDecimalMatrix."""
        return SparseDecimalMatrix._from_store(self.rows, self.columns, self._release())


class SparseDecimalMatrix(DecimalMatrix):
    """
    Immutable matrix storing only the cells that differ from a shared default value.

    Arithmetic cost is proportional to the number of explicitly stored cells:
    the default value of a result is computed once, in closed form, and only
    stored indices are visited. Every result is a new, independently owned
    matrix; operands are never modified.
    """

    def __init__(self, rows: int, columns: int, values: Values = None, default_value: Number = DEFAULT_VALUE):
        """
        Initialize SparseDecimalMatrix instance.

        Args:
            rows: Number of rows, strictly positive.
            columns: Number of columns, strictly positive.
            values: None for a matrix filled with default_value, a flat sequence of
                rows*columns values in row-major order, or a function called once per
                cell with (row, column). Values equal to default_value are not stored.
            default_value: Value of every cell that is not explicitly stored.
        """
        if values is None:
            builder = SparseMatrixBuilder(rows, columns, default_value)
        elif callable(values):
            builder = SparseMatrixBuilder.from_function(rows, columns, values, default_value)
        else:
            builder = SparseMatrixBuilder.from_values(rows, columns, values, default_value)
        self._rows = rows
        self._columns = columns
        self._store = builder._release()

    @classmethod
    def _from_store(cls, rows: int, columns: int, store: SparseStore) -> 'SparseDecimalMatrix':
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._columns = columns
        matrix._store = store
        return matrix

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, rows: int, columns: int,
                       default_value: Number = DEFAULT_VALUE) -> 'SparseDecimalMatrix':
        """
        Build a matrix from a coordinate list.

        Args:
            df: DataFrame with 'row', 'column' and 'value' columns. Cells not listed
                take the default value; later rows overwrite earlier ones.
            rows: Number of rows.
            columns: Number of columns.
            default_value: Value of every unlisted cell.
        """
        for col in ['row', 'column', 'value']:
            assert col in df.columns, f"Column \"{col}\" not found in dataframe"
        builder = SparseMatrixBuilder(rows, columns, default_value)
        for row, column, value in df[['row', 'column', 'value']].itertuples(index=False):
            builder.set(int(row), int(column), value)
        return builder.build()

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def default_value(self) -> Decimal:
        return self._store.default_value

    def _get(self, row: int, column: int) -> Decimal:
        return self._store[row * self._columns + column]

    # ************************************
    # diagnostics
    # ************************************

    def filled_count(self) -> int:
        """Number of explicitly stored cells."""
        return len(self._store)

    def empty_count(self) -> int:
        """Number of cells holding the default value."""
        return self.size - self.filled_count()

    def empty_ratio(self) -> float:
        """Fraction of cells holding the default value."""
        if self.size == 0:
            return 0.0
        return self.empty_count() / self.size

    def entries(self) -> Iterator[tuple[int, int, Decimal]]:
        """Yields (row, column, value) for every explicitly stored cell, in row-major order."""
        for index, value in self._store.sorted_items():
            yield index // self._columns, index % self._columns, value

    def to_dataframe(self) -> pd.DataFrame:
        """Returns the explicitly stored cells as a DataFrame with 'row', 'column' and 'value' columns."""
        return pd.DataFrame(list(self.entries()), columns=['row', 'column', 'value'])

    # ************************************
    # arithmetic
    # ************************************

    def _merge(self, other: 'SparseDecimalMatrix', op, context: Optional[decimal.Context]) -> 'SparseDecimalMatrix':
        check_same_shape(self, other)

        builder = SparseMatrixBuilder(self._rows, self._columns, op(self.default_value, other.default_value, context))
        merged_indices = self._store.merged_indices(other._store)
        logger.debug("sparse %s over %d merged indices", op.__name__, len(merged_indices))
        for index in merged_indices:
            builder.set_index(index, op(self._store[index], other._store[index], context))
        return builder.build()

    def add(self, other: DecimalMatrix, context: Optional[decimal.Context] = None) -> DecimalMatrix:
        if isinstance(other, SparseDecimalMatrix):
            return self._merge(other, scalar.add, context)
        logger.debug("add: %s operand is not sparse, using dense algorithm", type(other).__name__)
        return super().add(other, context)

    def subtract(self, other: DecimalMatrix, context: Optional[decimal.Context] = None) -> DecimalMatrix:
        if isinstance(other, SparseDecimalMatrix):
            return self._merge(other, scalar.subtract, context)
        logger.debug("subtract: %s operand is not sparse, using dense algorithm", type(other).__name__)
        return super().subtract(other, context)

    def multiply(self, value: Number, context: Optional[decimal.Context] = None) -> 'SparseDecimalMatrix':
        value = to_decimal(value)
        builder = SparseMatrixBuilder(self._rows, self._columns, scalar.multiply(self.default_value, value, context))
        for index, stored in self._store.sorted_items():
            builder.set_index(index, scalar.multiply(stored, value, context))
        return builder.build()

    def sum(self, context: Optional[decimal.Context] = None) -> Decimal:
        """Sum of all cells: the default value scaled by the empty count, then every stored value in ascending index order."""
        result = scalar.multiply(Decimal(self.empty_count()), self.default_value, context)
        for _, value in self._store.sorted_items():
            result = scalar.add(result, value, context)
        return result

    def product(self, context: Optional[decimal.Context] = None) -> Decimal:
        """
        Product of all cells.

        The default value is raised to the empty count (0 ** 0 == 1) and multiplied by
        every stored value in ascending index order. Without a context the dense
        algorithm is used instead, as an exact power of the default is not attempted.
        """
        if context is None:
            logger.debug("product: no rounding context, using dense algorithm")
            return super().product(None)

        result = scalar.power(self.default_value, self.empty_count(), context)
        for _, value in self._store.sorted_items():
            result = scalar.multiply(result, value, context)
        return result

    def __repr__(self) -> str:
        items_str = ", ".join(f"({r}, {c}): {v}" for r, c, v in self.entries())
        return f"SparseDecimalMatrix({self._rows}x{self._columns}, default={self.default_value}, {{{items_str}}})"
