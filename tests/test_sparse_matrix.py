import os
import sys
import pytest
import numpy as np
import pandas as pd
from decimal import Decimal

# Add the src directory to Python path to import local sparse_decimal
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sparse_decimal import (
    SparseDecimalMatrix,
    SparseMatrixBuilder,
    BuilderConsumedError,
    BoundsError,
    IndexOutOfRangeError,
)
from test_utils import assert_cells_equal, assert_canonical


@pytest.fixture
def compressed() -> SparseDecimalMatrix:
    """3x3 matrix with a single stored cell at (0, 0)."""
    builder = SparseMatrixBuilder(3, 3)
    builder.set(0, 0, Decimal(5))
    return builder.build()


class TestConstruction:
    """Empty, flat-value and generator construction."""

    @pytest.mark.parametrize("rows,columns", [(1, 1), (2, 3), (4, 1), (7, 5)])
    def test_empty_matrix_is_all_default(self, rows, columns):
        m = SparseDecimalMatrix(rows, columns)
        assert m.size == rows * columns
        assert m.filled_count() == 0
        assert m.default_value == Decimal(0)
        for r in range(rows):
            for c in range(columns):
                assert m.get(r, c) == m.default_value

    def test_flat_values_row_major(self):
        m = SparseDecimalMatrix(2, 3, [1, 0, 2, 0, 0, "3.5"])
        assert_cells_equal(m, [[1, 0, 2], [0, 0, "3.5"]])
        assert m.filled_count() == 3
        assert_canonical(m)

    def test_flat_values_equal_to_default_are_not_stored(self):
        m = SparseDecimalMatrix(2, 2, [Decimal("0.00"), 1, Decimal("-0"), 0])
        assert m.filled_count() == 1

    def test_generator_called_once_per_cell_in_row_major_order(self):
        calls = []

        def generator(row, column):
            calls.append((row, column))
            return row * 10 + column if row == column else 0

        m = SparseDecimalMatrix(2, 3, generator)
        assert calls == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
        assert_cells_equal(m, [[0, 0, 0], [0, 11, 0]])
        assert m.filled_count() == 1

    def test_non_zero_default_value(self):
        m = SparseDecimalMatrix(2, 2, [1, 1, 4, 1], default_value=1)
        assert m.default_value == Decimal(1)
        assert m.filled_count() == 1
        assert m.get(1, 0) == Decimal(4)

    def test_float_values_use_shortest_repr(self):
        m = SparseDecimalMatrix(1, 2, [0.1, 2.5])
        assert m.get(0, 0) == Decimal("0.1")
        assert m.get(0, 1) == Decimal("2.5")

    def test_bool_values_rejected(self):
        with pytest.raises(TypeError):
            SparseDecimalMatrix(1, 1, [True])


class TestDiagnostics:

    def test_compression_counts(self, compressed):
        assert compressed.filled_count() == 1
        assert compressed.empty_count() == 8
        assert compressed.empty_ratio() == pytest.approx(8 / 9)

    def test_shape_and_size(self, compressed):
        assert compressed.rows == 3
        assert compressed.columns == 3
        assert compressed.shape == (3, 3)
        assert compressed.size == 9

    def test_entries_in_row_major_order(self):
        m = SparseDecimalMatrix(2, 2, [0, 3, 4, 0])
        assert list(m.entries()) == [(0, 1, Decimal(3)), (1, 0, Decimal(4))]

    def test_repr(self, compressed):
        assert repr(compressed) == "SparseDecimalMatrix(3x3, default=0, {(0, 0): 5})"


class TestBuilder:
    """Canonical set and the builder to frozen matrix transition."""

    def test_set_then_reset_restores_filled_count(self):
        builder = SparseMatrixBuilder(3, 3)
        builder.set(1, 1, Decimal(2))
        before = builder.filled_count()
        builder.set(2, 2, Decimal("4.2"))
        assert builder.get(2, 2) == Decimal("4.2")
        assert builder.filled_count() == before + 1

        builder.set(2, 2, builder.default_value)
        assert builder.filled_count() == before
        assert builder.get(2, 2) == builder.default_value

    def test_overwrite_does_not_grow_store(self):
        builder = SparseMatrixBuilder(2, 2)
        builder.set(0, 1, 3)
        builder.set(0, 1, 4)
        assert builder.filled_count() == 1
        assert builder.get(0, 1) == Decimal(4)

    def test_set_index_matches_coordinates(self):
        builder = SparseMatrixBuilder(2, 3)
        builder.set_index(4, 9)
        assert builder.get(1, 1) == Decimal(9)

    def test_set_out_of_bounds_leaves_builder_unchanged(self):
        builder = SparseMatrixBuilder(2, 2)
        with pytest.raises(IndexError):
            builder.set(2, 0, 1)
        assert builder.filled_count() == 0

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_set_index_out_of_range_rejected(self, index):
        builder = SparseMatrixBuilder(2, 2)
        with pytest.raises(IndexOutOfRangeError):
            builder.set_index(index, 5)
        assert builder.filled_count() == 0

        m = builder.build()
        assert m.sum() == Decimal(0)
        assert list(m.entries()) == []

    def test_set_index_bounds_are_bounds_errors(self):
        builder = SparseMatrixBuilder(2, 3)
        builder.set_index(5, 1)
        with pytest.raises(BoundsError):
            builder.set_index(6, 1)
        assert builder.get(1, 2) == Decimal(1)

    def test_build_consumes_builder(self):
        builder = SparseMatrixBuilder(2, 2)
        builder.set(0, 0, 1)
        m = builder.build()
        assert m.get(0, 0) == Decimal(1)

        with pytest.raises(BuilderConsumedError):
            builder.set(1, 1, 2)
        with pytest.raises(BuilderConsumedError):
            builder.build()
        assert m.filled_count() == 1

    def test_from_values_and_from_function(self):
        a = SparseMatrixBuilder.from_values(2, 2, [1, 0, 0, 1]).build()
        b = SparseMatrixBuilder.from_function(2, 2, lambda r, c: 1 if r == c else 0).build()
        assert a.is_equal(b)

    def test_frozen_matrix_has_no_mutators(self, compressed):
        assert not hasattr(compressed, "set")
        assert not hasattr(compressed, "set_index")


class TestConversions:

    def test_to_numpy(self, compressed):
        array = compressed.to_numpy()
        assert array.shape == (3, 3)
        assert array.dtype == object
        assert array[0, 0] == Decimal(5)
        assert array[2, 2] == Decimal(0)

    def test_to_list(self):
        m = SparseDecimalMatrix(2, 2, [1, 0, 0, 2])
        assert m.to_list() == [[Decimal(1), Decimal(0)], [Decimal(0), Decimal(2)]]

    def test_dataframe_round_trip(self):
        m = SparseDecimalMatrix(3, 4, [0, 0, 1, 0, 0, 0, 0, "2.5", 0, 7, 0, 0])
        df = m.to_dataframe()
        assert list(df.columns) == ['row', 'column', 'value']
        assert len(df) == 3

        restored = SparseDecimalMatrix.from_dataframe(df, 3, 4)
        assert restored.is_equal(m)
        assert restored.filled_count() == 3

    def test_from_dataframe_elides_default_rows(self):
        df = pd.DataFrame({
            'row': np.array([0, 1, 1], dtype=np.int64),
            'column': np.array([0, 0, 1], dtype=np.int64),
            'value': [1.5, 1.0, np.float64(3.25)],
        })
        m = SparseDecimalMatrix.from_dataframe(df, 2, 2, default_value=1)
        assert m.filled_count() == 2
        assert_cells_equal(m, [["1.5", 1], [1, "3.25"]])

    def test_empty_dataframe(self):
        df = SparseDecimalMatrix(2, 2).to_dataframe()
        assert len(df) == 0
