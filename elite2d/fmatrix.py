"""Dense float matrix with column-major storage."""

from __future__ import annotations

import math
import random

FLT_MAX = 3.4028234663852886e38


class FMatrix:
    """Resizable rows x columns matrix of floats, initialised to zero."""

    __slots__ = ("_rows", "_columns", "_data")

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        self._rows = 0
        self._columns = 0
        self._data: list[float] = []
        self.resize(rows, columns)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def _index(self, row: int, column: int) -> int:
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError(f"Wrong index! [{row}, {column}]")
        return column * self._rows + row

    def _overlap(self, other: "FMatrix"):
        for row in range(min(self._rows, other._rows)):
            for column in range(min(self._columns, other._columns)):
                yield row, column

    def resize(self, rows: int, columns: int) -> None:
        """Change the shape; all previous contents are discarded."""
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._columns = columns
        self._data = [0.0] * (rows * columns)

    def set(self, row: int, column: int, value: float) -> None:
        self._data[self._index(row, column)] = value

    def get(self, row: int, column: int) -> float:
        return self._data[self._index(row, column)]

    def set_all(self, value: float) -> None:
        self._data = [value] * len(self._data)

    def set_row_all(self, row: int, value: float) -> None:
        for column in range(self._columns):
            self.set(row, column, value)

    def randomize(self, low: float, high: float) -> None:
        """Fill every element with a uniform random value in [low, high]."""
        self._data = [random.uniform(low, high) for _ in self._data]

    def add(self, row: int, column: int, value: float) -> None:
        self._data[self._index(row, column)] += value

    def add_matrix(self, other: "FMatrix") -> None:
        """Add ``other`` element-wise over the overlapping region."""
        for row, column in self._overlap(other):
            self.add(row, column, other.get(row, column))

    def subtract(self, other: "FMatrix") -> None:
        """Subtract ``other`` element-wise over the overlapping region."""
        for row, column in self._overlap(other):
            self.add(row, column, -other.get(row, column))

    def copy_from(self, other: "FMatrix") -> None:
        """Copy the overlapping region of ``other`` into this matrix."""
        for row, column in self._overlap(other):
            self.set(row, column, other.get(row, column))

    def matrix_multiply(self, other: "FMatrix", result: "FMatrix") -> None:
        """Write ``self @ other`` into ``result`` over the region ``result`` holds."""
        if other._rows < self._columns:
            raise ValueError(
                f"cannot multiply {self._rows}x{self._columns} "
                f"by {other._rows}x{other._columns}"
            )
        for row in range(min(self._rows, result._rows)):
            for column in range(min(other._columns, result._columns)):
                total = sum(
                    self.get(row, k) * other.get(k, column)
                    for k in range(self._columns)
                )
                result.set(row, column, total)

    def scalar_multiply(self, scalar: float) -> None:
        self._data = [v * scalar for v in self._data]

    def sigmoid(self) -> None:
        """Apply the logistic function to every element."""
        self._data = [_logistic(v) for v in self._data]

    def sum(self) -> float:
        return math.fsum(self._data)

    def dot(self, other: "FMatrix") -> float:
        """Sum of element-wise products over the overlapping region."""
        return math.fsum(
            self.get(row, column) * other.get(row, column)
            for row, column in self._overlap(other)
        )

    def max(self) -> float:
        """Largest element; ``-FLT_MAX`` for an empty matrix."""
        return max(self._data, default=-FLT_MAX)

    def max_of_row(self, row: int) -> float:
        """Largest element of ``row``; ``-FLT_MAX`` when there are no columns."""
        return max(
            (self.get(row, column) for column in range(self._columns)),
            default=-FLT_MAX,
        )

    def format(self) -> str:
        """Rows of tab-separated values with three decimals, one per line."""
        return "".join(
            "".join(f"{self.get(row, column):.3f}\t" for column in range(self._columns))
            + "\n"
            for row in range(self._rows)
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"FMatrix(rows={self._rows}, columns={self._columns})"


def _logistic(v: float) -> float:
    if v >= 0:
        return 1.0 / (1.0 + math.exp(-v))
    e = math.exp(v)
    return e / (1.0 + e)