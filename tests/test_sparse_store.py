import os
import dataclasses
import sys
import pytest
from decimal import Decimal

# Add the src directory to Python path to import local sparse_decimal
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sparse_decimal import SparseStore


class TestSparseStoreCanonicalization:
    """Values equal to the default value are never stored."""

    def test_missing_index_reads_default(self):
        store = SparseStore(default_value=Decimal("7"))
        assert store[3] == Decimal("7")
        assert store.get(3) == Decimal("7")
        assert len(store) == 0

    def test_set_non_default_stores_entry(self):
        store = SparseStore()
        store[4] = Decimal("2.5")
        assert 4 in store
        assert store[4] == Decimal("2.5")
        assert len(store) == 1

    def test_set_default_removes_entry(self):
        store = SparseStore()
        store[4] = Decimal("2.5")
        store[4] = Decimal("0")
        assert 4 not in store
        assert len(store) == 0

    def test_numeric_equality_not_representation(self):
        store = SparseStore(default_value=Decimal("1.0"))
        store[0] = Decimal("1.000")
        store[1] = Decimal("1E0")
        assert len(store) == 0

    def test_negative_zero_equals_zero_default(self):
        store = SparseStore()
        store[2] = Decimal("-0.00")
        assert len(store) == 0

    def test_default_value_cannot_be_reassigned(self):
        store = SparseStore()
        store[0] = Decimal(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            store.default_value = Decimal(5)
        assert store.default_value == Decimal(0)
        assert len(store) == 1

    def test_delete_resets_to_default(self):
        store = SparseStore(default_value=Decimal("1"))
        store[9] = Decimal("3")
        del store[9]
        del store[10]
        assert store[9] == Decimal("1")
        assert len(store) == 0


class TestSparseStoreTraversal:
    """Deterministic ordering and index merging."""

    def test_sorted_items_ascending(self):
        store = SparseStore()
        for index in [12, 3, 7, 0]:
            store[index] = Decimal(index + 1)
        assert [i for i, _ in store.sorted_items()] == [0, 3, 7, 12]

    def test_merged_indices_is_union(self):
        a = SparseStore()
        b = SparseStore()
        a[1] = Decimal(1)
        a[2] = Decimal(2)
        b[2] = Decimal(5)
        b[8] = Decimal(6)
        assert a.merged_indices(b) == {1, 2, 8}

    def test_copy_is_independent(self):
        store = SparseStore()
        store[1] = Decimal(1)
        copied = store.copy()
        copied[2] = Decimal(2)
        assert 2 not in store
        assert copied[1] == Decimal(1)

    def test_repr_lists_entries_in_order(self):
        store = SparseStore()
        store[5] = Decimal("2")
        store[1] = Decimal("3")
        assert repr(store) == "SparseStore(default=0, {1: 3, 5: 2})"
