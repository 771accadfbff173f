from decimal import Decimal
from dataclasses import dataclass, field

from .constants import DEFAULT_VALUE
from .scalar import is_equal


@dataclass(frozen=True)
class SparseStore:
    # entries are canonical against default_value, so it cannot be reassigned
    default_value: Decimal = DEFAULT_VALUE
    data_store: dict[int, Decimal] = field(default_factory=dict)

    def get(self, index: int) -> Decimal:
        """Get the value at linear index."""
        return self[index]

    def __getitem__(self, index: int) -> Decimal:
        """Returns the value at linear index.

        Args:
            index: The linear (row-major) index to get the value for.

        Returns:
            The stored value, or the default value if the index is not stored.
        """
        return self.data_store.get(index, self.default_value)

    def __setitem__(self, index: int, value: Decimal) -> None:
        """Sets the value at linear index.

        A value numerically equal to the default value is never stored; any
        existing entry at the index is removed instead.

        Args:
            index: The linear index to set the value for.
            value: The value to set.
        """
        if is_equal(value, self.default_value):
            self.data_store.pop(index, None)
        else:
            self.data_store[index] = value

    def __delitem__(self, index: int) -> None:
        """Resets the value at linear index to the default value."""
        self.data_store.pop(index, None)

    def __contains__(self, index: int) -> bool:
        """Checks if a non-default value is stored at linear index."""
        return index in self.data_store

    def __len__(self) -> int:
        """Returns the number of explicitly stored (non-default) values."""
        return len(self.data_store)

    def sorted_items(self) -> list[tuple[int, Decimal]]:
        """Returns (index, value) pairs in ascending index order.

        Reductions traverse the store in this order so that results rounded
        under a bounded context are reproducible.
        """
        return sorted(self.data_store.items())

    def merged_indices(self, other: 'SparseStore') -> set[int]:
        """Returns the union of indices stored in this store or in other."""
        return self.data_store.keys() | other.data_store.keys()

    def __repr__(self) -> str:
        """String representation of the store."""
        items_str = ", ".join(f"{k}: {v}" for k, v in self.sorted_items())
        return f"SparseStore(default={self.default_value}, {{{items_str}}})"

    def copy(self) -> 'SparseStore':
        """Returns a copy of the store."""
        return SparseStore(default_value=self.default_value, data_store=self.data_store.copy())
