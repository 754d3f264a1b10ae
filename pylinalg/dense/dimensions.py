"""
Dimensions: the (rows, cols) shape of a matrix.

Immutable value type. Transposing produces a new value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_length


@dataclass(frozen=True)
class Dimensions:
    """
    Shape of a row-major matrix.

    Attributes:
        rows: Number of rows (non-negative)
        cols: Number of columns (non-negative)

    Construction:
        Dimensions(2, 3)
        Dimensions.square(4)
        Dimensions.of((2, 3))
    """
    rows: int
    cols: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'rows', check_length(self.rows, 'rows'))
        object.__setattr__(self, 'cols', check_length(self.cols, 'cols'))

    @classmethod
    def square(cls, size: int) -> Dimensions:
        """Square shape with rows = cols = size."""
        return cls(size, size)

    @classmethod
    def of(cls, shape: Any) -> Dimensions:
        """
        Coerce a shape into Dimensions.

        Accepts an existing Dimensions or any (rows, cols) pair.
        """
        if isinstance(shape, Dimensions):
            return shape
        try:
            rows, cols = shape
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"shape: expected Dimensions or a (rows, cols) pair, got {shape!r}"
            ) from e
        return cls(rows, cols)

    def elements(self) -> int:
        """Total element count, rows * cols."""
        return self.rows * self.cols

    def transpose(self) -> Dimensions:
        """Shape with rows and cols swapped."""
        return Dimensions(self.cols, self.rows)

    def row_major(self, row: int, col: int) -> int:
        """
        Flat index of (row, col) in row-major storage.

        Not bounds-checked; the indexing operators check.
        """
        return row * self.cols + col

    def as_tuple(self) -> tuple[int, int]:
        """(rows, cols), compatible with numpy's shape."""
        return (self.rows, self.cols)

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"
