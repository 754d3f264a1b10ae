"""
RowView: non-owning window onto one row of a Matrix.

A view addresses ``length`` contiguous elements of the parent's flat
storage starting at ``start``. It shares the storage list, so writes
through a mutable view land in the matrix and later writes to the matrix
are visible through the view. Matrix operations mutate that list in
place and never rebind it.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice
from typing import Any, Iterator, TYPE_CHECKING

from pylinalg.core.validation import check_index

if TYPE_CHECKING:
    from pylinalg.dense.vector import Vector


class RowView(Sequence):
    """Sequence view over a single matrix row."""

    __slots__ = ('_storage', '_start', '_length', '_writable')

    def __init__(self, storage: list[Any], start: int, length: int, writable: bool):
        self._storage = storage
        self._start = start
        self._length = length
        self._writable = writable

    @property
    def writable(self) -> bool:
        return self._writable

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, col: Any) -> Any:
        if isinstance(col, slice):
            raise TypeError("RowView does not support slicing; use to_list()")
        j = check_index(col, self._length, 'col')
        return self._storage[self._start + j]

    def __setitem__(self, col: Any, value: Any) -> None:
        if not self._writable:
            raise TypeError("row view is read-only; use Matrix.row_mut()")
        j = check_index(col, self._length, 'col')
        self._storage[self._start + j] = value

    def __iter__(self) -> Iterator[Any]:
        return islice(self._storage, self._start, self._start + self._length)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (RowView, list, tuple)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def to_list(self) -> list[Any]:
        """Owned copy of the row's elements."""
        return self._storage[self._start:self._start + self._length]

    def to_vector(self) -> Vector:
        """Owned copy of the row as a Vector."""
        from pylinalg.dense.vector import Vector
        return Vector._wrap(self.to_list())

    def __repr__(self) -> str:
        return f"RowView({self.to_list()!r})"
